from enum import Enum

class TrxStatusEnum(str, Enum):
    pending = "pending"
    completed = "completed"
    cancelled = "cancelled"
