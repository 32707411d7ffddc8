# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

import pendulum

from plangrid.model.entity_id import EntityId


class ScheduledItem(TypedDict):
    id: EntityId
    kind: str
    title: Optional[str]
    start: Optional[pendulum.DateTime]
    end: Optional[pendulum.DateTime]
    is_draft: bool
    color: NotRequired[Optional[str]]
