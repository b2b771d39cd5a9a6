"""
Pub/Sub push delivery schemas.

Defines the wire-level envelope a push subscription POSTs to the webhook.
Field values are kept exactly as delivered: ``publishTime`` stays a string and
``data`` stays base64 text until the decoder handles it.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class PubSubMessageData(BaseModel):
    """
    The ``message`` object of a push delivery.

    ``data`` carries the base64-encoded publisher payload; ``messageId`` is the
    delivery system's unique id (downstream consumers dedupe on it).
    """

    data: StrictStr = Field(
        description="Base64 (standard, padded) encoded payload",
        examples=["eyJlbWFpbF9hZGRyZXNzIjoidXNlckBleGFtcGxlLmNvbSIsImhpc3RvcnlfaWQiOiIxMjM0NTYifQ=="],
    )
    message_id: StrictStr = Field(
        alias="messageId",
        description="Unique identifier assigned by Pub/Sub",
        examples=["unique_message_id"],
    )
    publish_time: StrictStr = Field(
        alias="publishTime",
        description="ISO-8601 publish timestamp, passed through unparsed",
        examples=["2021-05-05T12:00:00.000Z"],
    )

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class PubSubEnvelope(BaseModel):
    """Top-level push request body."""

    message: PubSubMessageData
    subscription: StrictStr = Field(
        description="Originating subscription, opaque",
        examples=["projects/my-project/subscriptions/my-subscription"],
    )

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        json_schema_extra={
            "examples": [
                {
                    "message": {
                        "data": "eyJlbWFpbF9hZGRyZXNzIjoidXNlckBleGFtcGxlLmNvbSIsImhpc3RvcnlfaWQiOiIxMjM0NTYifQ==",
                        "messageId": "unique_message_id",
                        "publishTime": "2021-05-05T12:00:00.000Z",
                    },
                    "subscription": "projects/my-project/subscriptions/my-subscription",
                }
            ]
        },
    )
