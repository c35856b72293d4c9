from .create import CreateTXTRecord, CreateTXTRecordResult
from .delete import DeleteRecord, DeleteRecordResult
from .modify import ModifyTXTRecord, ModifyTXTRecordResult
from .record_list import DomainRecordList, DomainRecordListResult, RecordCountInfo, RecordListItem

__all__ = [
    "CreateTXTRecord",
    "CreateTXTRecordResult",
    "DeleteRecord",
    "DeleteRecordResult",
    "ModifyTXTRecord",
    "ModifyTXTRecordResult",
    "DomainRecordList",
    "DomainRecordListResult",
    "RecordCountInfo",
    "RecordListItem",
]
