from devicehub.models.schemas import (
    LicenseCreate,
    LicenseOut,
    MaintenanceRecordCreate,
    MaintenanceRecordOut,
    WarrantyCreate,
    WarrantyOut,
)
from devicehub.routes.crud import build_crud_router
from devicehub.services import inventory

warranty_router = build_crud_router(
    inventory.warranties, WarrantyCreate, WarrantyOut, prefix="/api/warranties", tag="warranties"
)
license_router = build_crud_router(
    inventory.licenses, LicenseCreate, LicenseOut, prefix="/api/licenses", tag="licenses"
)
maintenance_router = build_crud_router(
    inventory.maintenance_records,
    MaintenanceRecordCreate,
    MaintenanceRecordOut,
    prefix="/api/maintenances",
    tag="maintenances",
)
