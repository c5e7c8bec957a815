from devicehub.models.department import Department
from devicehub.models.supplier import Supplier
from devicehub.models.employee import Employee
from devicehub.models.asset import Asset
from devicehub.models.warranty import Warranty
from devicehub.models.license import License
from devicehub.models.maintenance import MaintenanceRecord

__all__ = [
    "Department",
    "Supplier",
    "Employee",
    "Asset",
    "Warranty",
    "License",
    "MaintenanceRecord",
]
