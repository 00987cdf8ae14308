"""Export a rotation schedule as an Excel workbook or CSV."""
import io
from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from routers.schedule import checked_config, config_query
from schemas import RotationConfigIn
from rotation.engine import run
from rotation.write_schedule import csv_bytes, csv_filename, workbook_bytes

router = APIRouter()


@router.get("/excel")
def export_excel(data: RotationConfigIn = Depends(config_query)):
    """SCHEDULE + SUMMARY (+ VIOLATIONS) sheets, one row per day."""
    result = run(checked_config(data))
    buf = workbook_bytes(result)
    filename = f"supervisor_schedule_{result.config.total_days}d.xlsx"
    return StreamingResponse(
        buf,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.get("/csv")
def export_csv(data: RotationConfigIn = Depends(config_query)):
    result = run(checked_config(data))
    return StreamingResponse(
        io.BytesIO(csv_bytes(result)),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={csv_filename(result)}"},
    )
