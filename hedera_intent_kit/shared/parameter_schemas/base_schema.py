from datetime import datetime
from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from hiero_sdk_python.schedule.schedule_create_transaction import ScheduleCreateParams


class BaseModelWithArbitraryTypes(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)


class SchedulingParams(BaseModelWithArbitraryTypes):
    is_scheduled: Annotated[
        bool,
        Field(
            description="If true, the transaction is created as a scheduled transaction."
        ),
    ] = False
    admin_key: Annotated[
        Optional[Union[bool, str]],
        Field(
            description="Admin key of the schedule. true uses your key, a string sets it explicitly."
        ),
    ] = None
    payer_account_id: Annotated[
        Optional[str],
        Field(description="Account that pays for executing the scheduled transaction."),
    ] = None
    expiration_time: Annotated[
        Optional[datetime],
        Field(description="Time the schedule expires (ISO 8601)."),
    ] = None
    wait_for_expiry: Annotated[
        bool,
        Field(description="If true, execute at expiration rather than on last signature."),
    ] = False
    schedule_memo: Annotated[
        Optional[str], Field(description="Memo of the schedule entity.")
    ] = None


class OptionalScheduledTransactionParams(BaseModelWithArbitraryTypes):
    scheduling_params: Annotated[
        Optional[SchedulingParams],
        Field(description="Optional scheduling parameters."),
    ] = None


class OptionalScheduledTransactionParamsNormalised(BaseModelWithArbitraryTypes):
    scheduling_params: Optional[ScheduleCreateParams] = None
