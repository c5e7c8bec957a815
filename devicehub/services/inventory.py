from typing import List, Optional

from sqlalchemy.orm import Session

from devicehub.models import (
    Asset,
    Department,
    Employee,
    License,
    MaintenanceRecord,
    Supplier,
    Warranty,
)
from devicehub.services.repository import EntityRepository

assets = EntityRepository(Asset)
departments = EntityRepository(Department)
suppliers = EntityRepository(Supplier)
employees = EntityRepository(Employee)
warranties = EntityRepository(Warranty)
licenses = EntityRepository(License)
maintenance_records = EntityRepository(MaintenanceRecord, label="MaintenanceRecord")


def licenses_for_asset(db: Session, asset_id: int) -> List[License]:
    assets.get(db, asset_id)
    return licenses.list_by(db, asset_id=asset_id)


def maintenance_for_asset(db: Session, asset_id: int) -> List[MaintenanceRecord]:
    assets.get(db, asset_id)
    return maintenance_records.list_by(db, asset_id=asset_id)


def warranty_for_asset(db: Session, asset_id: int) -> Optional[Warranty]:
    assets.get(db, asset_id)
    found = warranties.list_by(db, asset_id=asset_id)
    return found[0] if found else None


def assets_in_department(db: Session, department_id: int) -> List[Asset]:
    departments.get(db, department_id)
    return assets.list_by(db, department_id=department_id)


def employees_in_department(db: Session, department_id: int) -> List[Employee]:
    departments.get(db, department_id)
    return employees.list_by(db, department_id=department_id)


def assets_from_supplier(db: Session, supplier_id: int) -> List[Asset]:
    suppliers.get(db, supplier_id)
    return assets.list_by(db, supplier_id=supplier_id)


def warranties_from_supplier(db: Session, supplier_id: int) -> List[Warranty]:
    suppliers.get(db, supplier_id)
    return warranties.list_by(db, supplier_id=supplier_id)


def assets_for_employee(db: Session, employee_id: int) -> List[Asset]:
    employees.get(db, employee_id)
    return assets.list_by(db, responsible_id=employee_id)
