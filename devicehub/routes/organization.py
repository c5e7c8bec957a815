from typing import List

from fastapi import Depends
from sqlalchemy.orm import Session

from devicehub.db import get_db
from devicehub.models.schemas import (
    AssetOut,
    DepartmentCreate,
    DepartmentOut,
    EmployeeCreate,
    EmployeeOut,
    SupplierCreate,
    SupplierOut,
    WarrantyOut,
)
from devicehub.routes.crud import build_crud_router
from devicehub.services import inventory

department_router = build_crud_router(
    inventory.departments, DepartmentCreate, DepartmentOut, prefix="/api/departments", tag="departments"
)
supplier_router = build_crud_router(
    inventory.suppliers, SupplierCreate, SupplierOut, prefix="/api/suppliers", tag="suppliers"
)
# EmployeeOut leaves the credential out of every response
employee_router = build_crud_router(
    inventory.employees, EmployeeCreate, EmployeeOut, prefix="/api/employees", tag="employees"
)


@department_router.get("/{record_id}/assets", response_model=List[AssetOut])
def list_department_assets(record_id: int, db: Session = Depends(get_db)):
    return inventory.assets_in_department(db, record_id)


@department_router.get("/{record_id}/employees", response_model=List[EmployeeOut])
def list_department_employees(record_id: int, db: Session = Depends(get_db)):
    return inventory.employees_in_department(db, record_id)


@supplier_router.get("/{record_id}/assets", response_model=List[AssetOut])
def list_supplier_assets(record_id: int, db: Session = Depends(get_db)):
    return inventory.assets_from_supplier(db, record_id)


@supplier_router.get("/{record_id}/warranties", response_model=List[WarrantyOut])
def list_supplier_warranties(record_id: int, db: Session = Depends(get_db)):
    return inventory.warranties_from_supplier(db, record_id)


@employee_router.get("/{record_id}/assets", response_model=List[AssetOut])
def list_employee_assets(record_id: int, db: Session = Depends(get_db)):
    return inventory.assets_for_employee(db, record_id)
