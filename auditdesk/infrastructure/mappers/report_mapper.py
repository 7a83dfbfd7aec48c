"""StoreReport <-> record mapping. Every figure is required."""

from auditdesk.domain.models.report import StoreReport
from auditdesk.infrastructure.mappers.base import EntityMapper
from auditdesk.infrastructure.mappers.fields import as_datetime, as_float, as_int, as_str, required, to_utc
from auditdesk.infrastructure.store.records import Record

REPORT_RECORD_TYPE = "StoreReport"

F_STORE_CODE = "storeCode"
F_DATE = "date"


class StoreReportMapper(EntityMapper[StoreReport]):
    record_type = REPORT_RECORD_TYPE

    def _build(self, record: Record) -> StoreReport:
        return StoreReport(
            store_code=required(record, F_STORE_CODE, as_str),
            date=required(record, F_DATE, as_datetime),
            total_sales=required(record, "totalSales", as_float),
            total_transactions=required(record, "totalTransactions", as_int),
            total_items=required(record, "totalItems", as_int),
            upt=required(record, "upt", as_float),
            ads=required(record, "ads", as_float),
            ccp_pct=required(record, "ccpPct", as_float),
            gp_pct=required(record, "gpPct", as_float),
            record_id=record.record_id,
            modified_at=record.modified_at,
        )

    def to_record(self, entity: StoreReport) -> Record:
        fields = {
            F_STORE_CODE: entity.store_code,
            F_DATE: to_utc(entity.date, F_DATE),
            "totalSales": entity.total_sales,
            "totalTransactions": entity.total_transactions,
            "totalItems": entity.total_items,
            "upt": entity.upt,
            "ads": entity.ads,
            "ccpPct": entity.ccp_pct,
            "gpPct": entity.gp_pct,
        }
        return Record(record_type=REPORT_RECORD_TYPE, fields=fields, record_id=entity.record_id)
