from pydantic import BaseModel, ConfigDict
from typing import Optional, Union
import datetime


class DepartmentBase(BaseModel):
    name: str
    description: Optional[str] = None

class DepartmentCreate(DepartmentBase):
    pass

class DepartmentOut(DepartmentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class SupplierBase(BaseModel):
    name: str
    tax_id: Optional[str] = None
    contact: Optional[str] = None
    address: Optional[str] = None

class SupplierCreate(SupplierBase):
    pass

class SupplierOut(SupplierBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class EmployeeBase(BaseModel):
    name: str
    role: Optional[str] = None
    email: Optional[str] = None
    department_id: Optional[int] = None

class EmployeeCreate(EmployeeBase):
    credential: Optional[str] = None

class EmployeeOut(EmployeeBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class AssetBase(BaseModel):
    name: str
    description: Optional[str] = None
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    serial_number: Optional[str] = None
    acquisition_date: Optional[datetime.date] = None
    value: Optional[float] = None
    location: Optional[str] = None
    status: Optional[str] = None
    responsible_id: Optional[int] = None
    department_id: Optional[int] = None
    supplier_id: Optional[int] = None

class AssetCreate(AssetBase):
    pass

class AssetOut(AssetBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class WarrantyBase(BaseModel):
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None
    supplier_id: int
    asset_id: int

class WarrantyCreate(WarrantyBase):
    pass

class WarrantyOut(WarrantyBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class LicenseBase(BaseModel):
    name: str
    type: Optional[str] = None
    serial_number: Optional[str] = None
    acquisition_date: Optional[datetime.date] = None
    expiration_date: Optional[datetime.date] = None
    software: Optional[str] = None
    asset_id: int

class LicenseCreate(LicenseBase):
    pass

class LicenseOut(LicenseBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class MaintenanceRecordBase(BaseModel):
    date: Optional[datetime.date] = None
    description: Optional[str] = None
    cost: Optional[float] = None
    asset_id: int

class MaintenanceRecordCreate(MaintenanceRecordBase):
    pass

class MaintenanceRecordOut(MaintenanceRecordBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class MessageOut(BaseModel):
    message: str
    detail: Optional[Union[dict, list]] = None
