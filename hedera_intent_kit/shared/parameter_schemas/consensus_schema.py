from datetime import datetime
from typing import Annotated, Optional, Union

from hiero_sdk_python import AccountId, PublicKey, TopicId
from pydantic import Field

from hedera_intent_kit.shared.parameter_schemas.base_schema import (
    BaseModelWithArbitraryTypes,
    OptionalScheduledTransactionParams,
    OptionalScheduledTransactionParamsNormalised,
)


class CreateTopicParameters(BaseModelWithArbitraryTypes):
    is_submit_key: Annotated[
        bool, Field(description="Whether to set a submit key for the topic.")
    ] = False
    topic_memo: Annotated[Optional[str], Field(description="Memo for the topic.")] = None
    transaction_memo: Annotated[
        Optional[str], Field(description="Memo to include with the transaction.")
    ] = None


class CreateTopicParametersNormalised(BaseModelWithArbitraryTypes):
    memo: Optional[str] = None
    admin_key: Optional[PublicKey] = None
    submit_key: Optional[PublicKey] = None
    auto_renew_account_id: Optional[AccountId] = None
    transaction_memo: Optional[str] = None


class SubmitTopicMessageParameters(OptionalScheduledTransactionParams):
    topic_id: Annotated[
        str, Field(description="The ID of the topic to submit the message to.")
    ]
    message: Annotated[
        str, Field(min_length=1, description="The message to submit to the topic.")
    ]
    transaction_memo: Annotated[
        Optional[str], Field(description="Memo to include with the transaction.")
    ] = None


class SubmitTopicMessageParametersNormalised(
    OptionalScheduledTransactionParamsNormalised
):
    topic_id: TopicId
    message: str
    transaction_memo: Optional[str] = None


class DeleteTopicParameters(BaseModelWithArbitraryTypes):
    topic_id: Annotated[str, Field(description="The ID of the topic to delete.")]


class DeleteTopicParametersNormalised(BaseModelWithArbitraryTypes):
    topic_id: TopicId


class UpdateTopicParameters(BaseModelWithArbitraryTypes):
    topic_id: Annotated[str, Field(description="The ID of the topic to update.")]
    topic_memo: Annotated[
        Optional[str], Field(description="New memo for the topic.")
    ] = None
    admin_key: Annotated[
        Optional[Union[bool, str]],
        Field(description="New admin key: true for your key, or a public key string."),
    ] = None
    submit_key: Annotated[
        Optional[Union[bool, str]],
        Field(description="New submit key: true for your key, or a public key string."),
    ] = None
    auto_renew_account_id: Annotated[
        Optional[str], Field(description="Account to automatically pay for renewal.")
    ] = None
    auto_renew_period: Annotated[
        Optional[int], Field(gt=0, description="Auto renew period in seconds.")
    ] = None
    expiration_time: Annotated[
        Optional[datetime],
        Field(description="New expiration time for the topic (ISO 8601)."),
    ] = None


class UpdateTopicParametersNormalised(BaseModelWithArbitraryTypes):
    topic_id: TopicId
    memo: Optional[str] = None
    admin_key: Optional[PublicKey] = None
    submit_key: Optional[PublicKey] = None
    auto_renew_account_id: Optional[AccountId] = None
    auto_renew_period: Optional[int] = None
    expiration_time: Optional[datetime] = None


class GetTopicInfoParameters(BaseModelWithArbitraryTypes):
    topic_id: Annotated[str, Field(description="The topic ID to query.")]


class TopicMessagesQueryParameters(BaseModelWithArbitraryTypes):
    topic_id: Annotated[str, Field(description="The topic ID to query.")]
    start_time: Annotated[
        Optional[datetime],
        Field(description="Only return messages after this time (ISO 8601)."),
    ] = None
    end_time: Annotated[
        Optional[datetime],
        Field(description="Only return messages before this time (ISO 8601)."),
    ] = None
    limit: Annotated[
        Optional[int], Field(gt=0, description="Maximum number of messages to return.")
    ] = None


class TopicMessagesQueryParametersNormalised(BaseModelWithArbitraryTypes):
    topic_id: str
    lower_timestamp: Optional[str] = None
    upper_timestamp: Optional[str] = None
    limit: int
