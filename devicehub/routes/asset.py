import io
from typing import List, Optional

import pandas as pd
from fastapi import Depends, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from devicehub.db import get_db
from devicehub.models.schemas import AssetCreate, AssetOut, LicenseOut, MaintenanceRecordOut, WarrantyOut
from devicehub.routes.crud import build_crud_router
from devicehub.services import inventory

router = build_crud_router(inventory.assets, AssetCreate, AssetOut, prefix="/api/assets", tag="assets")

EXPORT_COLUMNS = {
    "id": "ID",
    "name": "Name",
    "manufacturer": "Manufacturer",
    "model": "Model",
    "serial_number": "Serial number",
    "acquisition_date": "Acquired",
    "value": "Value",
    "location": "Location",
    "status": "Status",
    "department_id": "Department",
    "supplier_id": "Supplier",
    "responsible_id": "Responsible",
}


@router.get("/export/excel")
def export_assets_excel(
    department_id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    ):
    if department_id is not None:
        assets = inventory.assets_in_department(db, department_id)
    else:
        assets = inventory.assets.list(db)

    data = [
        {label: getattr(asset, field) for field, label in EXPORT_COLUMNS.items()}
        for asset in assets
    ]
    df = pd.DataFrame(data, columns=list(EXPORT_COLUMNS.values()))

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="xlsxwriter") as writer:
        df.to_excel(writer, sheet_name="Assets", index=False)
        worksheet = writer.sheets["Assets"]
        for i, col in enumerate(df.columns):
            longest = df[col].map(lambda v: len(str(v))).max() if len(df) else 0
            worksheet.set_column(i, i, max(longest, len(col)) + 2)

    output.seek(0)
    headers = {"Content-Disposition": "attachment; filename=assets.xlsx"}
    return StreamingResponse(
        output,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers=headers,
    )


@router.get("/{record_id}/licenses", response_model=List[LicenseOut])
def list_asset_licenses(record_id: int, db: Session = Depends(get_db)):
    return inventory.licenses_for_asset(db, record_id)


@router.get("/{record_id}/maintenances", response_model=List[MaintenanceRecordOut])
def list_asset_maintenances(record_id: int, db: Session = Depends(get_db)):
    return inventory.maintenance_for_asset(db, record_id)


@router.get("/{record_id}/warranty", response_model=Optional[WarrantyOut])
def get_asset_warranty(record_id: int, db: Session = Depends(get_db)):
    return inventory.warranty_for_asset(db, record_id)
