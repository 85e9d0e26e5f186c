from typing import Annotated, Optional

from pydantic import Field

from hedera_intent_kit.shared.parameter_schemas.base_schema import (
    BaseModelWithArbitraryTypes,
)


class TransactionRecordQueryParameters(BaseModelWithArbitraryTypes):
    transaction_id: Annotated[
        str,
        Field(
            description='Transaction ID, as "0.0.x@sss.nnn" or "0.0.x-sss-nnn".',
        ),
    ]
    nonce: Annotated[
        Optional[int],
        Field(ge=0, description="Optional nonnegative nonce of the transaction."),
    ] = None


class TransactionRecordQueryParametersNormalised(BaseModelWithArbitraryTypes):
    transaction_id: str
    nonce: Optional[int] = None
