from typing import Optional, Union

from pydantic import Field

from comment_client.schemas.sentiment.base import ServiceAnswer


class Comment(ServiceAnswer):
    """A classified comment as answered by the sentiment service"""

    id: Optional[Union[int, str]] = Field(None, description="Identifier assigned by the service")
    text: Optional[str] = Field(None, description="Comment text")
    prediction: Optional[str] = Field(
        None,
        alias="previsao",
        description="Sentiment label, Positive or Negative in any casing"
    )
    probability: Optional[float] = Field(
        None,
        alias="probabilidade",
        description="Probability of the predicted label, between 0 and 1"
    )
