from typing import Union

from pydantic import BaseModel, ConfigDict, Field


# Control values arrive the way the page holds them: text, or a number
ControlValue = Union[str, int, float, None]


class ControlsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CreateCommentRequest(ControlsRequest):
    comment_text: ControlValue = Field("", alias="comment-text", description="Text to classify")


class SearchCommentRequest(ControlsRequest):
    search_id: ControlValue = Field("", alias="search-id", description="Id of the comment to fetch")


class UpdateCommentRequest(ControlsRequest):
    update_id: ControlValue = Field("", alias="update-id", description="Id of the comment to edit")
    update_text: ControlValue = Field("", alias="update-text", description="Replacement text")


class DeleteCommentRequest(ControlsRequest):
    delete_id: ControlValue = Field("", alias="delete-id", description="Id of the comment to remove")


class CustomStatsRequest(ControlsRequest):
    stats_custom: ControlValue = Field(
        "",
        alias="stats-custom",
        description="Number of recent comments to aggregate"
    )
