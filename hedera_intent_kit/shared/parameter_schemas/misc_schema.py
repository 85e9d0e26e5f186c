from typing import Annotated, Optional

from pydantic import Field

from hedera_intent_kit.shared.parameter_schemas.base_schema import (
    BaseModelWithArbitraryTypes,
)


class ExchangeRateQueryParameters(BaseModelWithArbitraryTypes):
    timestamp: Annotated[
        Optional[str],
        Field(
            pattern=r"^\d+(\.\d{1,9})?$",
            description="Historical timestamp to query (seconds or seconds.nanos since epoch).",
        ),
    ] = None
