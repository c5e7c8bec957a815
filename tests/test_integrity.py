from datetime import date

import pytest
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError

from devicehub.models import Department, schemas
from devicehub.services import inventory
from devicehub.services.errors import (
    ReferentialIntegrityViolation,
    UniqueConstraintViolation,
    ValidationFailure,
)


@pytest.fixture
def supplier(db):
    return inventory.suppliers.create(db, schemas.SupplierCreate(name="Dell Brasil", tax_id="72.381.189/0001-10"))


@pytest.fixture
def department(db):
    return inventory.departments.create(db, schemas.DepartmentCreate(name="TI"))


@pytest.fixture
def asset(db):
    return inventory.assets.create(db, schemas.AssetCreate(name="Notebook Dell"))


def _warranty(db, supplier_id, asset_id):
    return inventory.warranties.create(
        db,
        schemas.WarrantyCreate(
            start_date=date(2024, 1, 1), end_date=date(2026, 1, 1), supplier_id=supplier_id, asset_id=asset_id
        ),
    )


def test_department_with_assets_cannot_be_deleted(db, department):
    inventory.assets.create(db, schemas.AssetCreate(name="Notebook Dell", department_id=department.id))

    with pytest.raises(ReferentialIntegrityViolation) as excinfo:
        inventory.departments.delete(db, department.id)

    assert excinfo.value.dependents == {"assets": 1}
    assert excinfo.value.status_code == 409
    assert inventory.departments.get(db, department.id).name == "TI"


def test_department_with_employees_cannot_be_deleted(db, department):
    inventory.employees.create(db, schemas.EmployeeCreate(name="Ana", department_id=department.id))

    with pytest.raises(ReferentialIntegrityViolation) as excinfo:
        inventory.departments.delete(db, department.id)

    assert excinfo.value.dependents == {"employees": 1}


def test_deleting_the_dependent_unblocks_the_parent(db, department):
    asset = inventory.assets.create(db, schemas.AssetCreate(name="Notebook Dell", department_id=department.id))
    with pytest.raises(ReferentialIntegrityViolation):
        inventory.departments.delete(db, department.id)

    inventory.assets.delete(db, asset.id)
    inventory.departments.delete(db, department.id)

    assert inventory.departments.list(db) == []


def test_supplier_is_protected_by_assets_and_warranties(db, supplier, asset):
    inventory.assets.create(db, schemas.AssetCreate(name="Monitor Dell", supplier_id=supplier.id))
    _warranty(db, supplier.id, asset.id)

    with pytest.raises(ReferentialIntegrityViolation) as excinfo:
        inventory.suppliers.delete(db, supplier.id)

    assert excinfo.value.dependents == {"assets": 1, "warranties": 1}


def test_responsible_employee_cannot_be_deleted(db):
    employee = inventory.employees.create(db, schemas.EmployeeCreate(name="Ana"))
    inventory.assets.create(db, schemas.AssetCreate(name="Notebook Dell", responsible_id=employee.id))

    with pytest.raises(ReferentialIntegrityViolation) as excinfo:
        inventory.employees.delete(db, employee.id)

    assert excinfo.value.dependents == {"assets": 1}


def test_asset_with_children_cannot_be_deleted(db, supplier, asset):
    inventory.licenses.create(db, schemas.LicenseCreate(name="Office", asset_id=asset.id))
    inventory.maintenance_records.create(db, schemas.MaintenanceRecordCreate(asset_id=asset.id, cost=150.0))
    _warranty(db, supplier.id, asset.id)

    with pytest.raises(ReferentialIntegrityViolation) as excinfo:
        inventory.assets.delete(db, asset.id)

    assert excinfo.value.dependents == {"licenses": 1, "maintenance_records": 1, "warranties": 1}
    assert inventory.licenses_for_asset(db, asset.id)


def test_second_warranty_for_same_asset_is_rejected(db, supplier, asset):
    _warranty(db, supplier.id, asset.id)

    with pytest.raises(UniqueConstraintViolation) as excinfo:
        _warranty(db, supplier.id, asset.id)

    assert excinfo.value.field == "asset_id"
    assert len(inventory.warranties.list(db)) == 1


def test_warranty_can_be_updated_in_place_but_not_moved_onto_a_taken_asset(db, supplier, asset):
    other = inventory.assets.create(db, schemas.AssetCreate(name="Monitor LG"))
    first = _warranty(db, supplier.id, asset.id)
    second = _warranty(db, supplier.id, other.id)

    updated = inventory.warranties.update(
        db, first.id, schemas.WarrantyCreate(end_date=date(2027, 1, 1), supplier_id=supplier.id, asset_id=asset.id)
    )
    assert updated.end_date == date(2027, 1, 1)

    with pytest.raises(UniqueConstraintViolation):
        inventory.warranties.update(
            db, second.id, schemas.WarrantyCreate(supplier_id=supplier.id, asset_id=asset.id)
        )
    assert inventory.warranties.get(db, second.id).asset_id == other.id


def test_store_rejects_second_warranty_on_its_own(db, supplier, asset):
    _warranty(db, supplier.id, asset.id)

    with pytest.raises(IntegrityError):
        db.add(inventory.warranties.model(supplier_id=supplier.id, asset_id=asset.id))
        db.commit()
    db.rollback()


def test_dangling_reference_on_create_is_rejected(db):
    with pytest.raises(ValidationFailure) as excinfo:
        inventory.assets.create(db, schemas.AssetCreate(name="Notebook Dell", department_id=99))

    assert excinfo.value.field == "department_id"
    assert excinfo.value.status_code == 422
    assert inventory.assets.list(db) == []


def test_dangling_reference_on_update_is_rejected(db, asset):
    with pytest.raises(ValidationFailure):
        inventory.assets.update(db, asset.id, schemas.AssetCreate(name="Notebook Dell", supplier_id=5))

    assert inventory.assets.get(db, asset.id).supplier_id is None


def test_owned_records_need_an_existing_asset(db):
    with pytest.raises(ValidationFailure):
        inventory.licenses.create(db, schemas.LicenseCreate(name="Office", asset_id=1))
    with pytest.raises(ValidationFailure):
        inventory.maintenance_records.create(db, schemas.MaintenanceRecordCreate(asset_id=1))


def test_store_enforces_restrict_without_the_repository(db, department):
    inventory.assets.create(db, schemas.AssetCreate(name="Notebook Dell", department_id=department.id))

    with pytest.raises(IntegrityError):
        db.execute(delete(Department).where(Department.id == department.id))
        db.commit()
    db.rollback()


def test_store_refusal_surfaces_when_precheck_misses(db, department, monkeypatch):
    inventory.assets.create(db, schemas.AssetCreate(name="Notebook Dell", department_id=department.id))
    monkeypatch.setattr(inventory.departments, "dependents", lambda session, record_id: {})

    with pytest.raises(ReferentialIntegrityViolation):
        inventory.departments.delete(db, department.id)

    assert inventory.departments.get(db, department.id).name == "TI"
