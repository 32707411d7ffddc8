# SPDX-License-Identifier: MIT

import datetime
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

import pendulum
from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from plangrid import configuration
from plangrid.model.entity_id import generate_entity_id
from plangrid.model.item_kind import ItemKind
from plangrid.model.scheduled_item import ScheduledItem


class PlanRepository:
    """Read-only access to a YAML plan file."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._plans: Optional[list[ScheduledItem]] = None

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_PLANS_PATH

    @property
    def plans(self) -> list[ScheduledItem]:
        if self._plans is None:
            self.__load_data()
        if self._plans is None:
            raise ValueError()
        return self._plans

    def __load_data(self) -> None:
        try:
            raw_data = load(self.path.read_text(), Loader=Loader)
        except YAMLError as e:
            raise ValueError(f"{self.path} is not valid YAML: {e}") from e

        if raw_data is None:
            self._plans = []
            return
        if not isinstance(raw_data, dict) or not isinstance(
            raw_data.get("plans", []), list
        ):
            raise ValueError(f"{self.path} must contain a 'plans' list")

        self._plans = [
            self.__convert_plan_for_deserialization(raw_plan)
            for raw_plan in raw_data.get("plans") or []
        ]

    def __convert_plan_for_deserialization(
        self, plan: dict[str, Any]
    ) -> ScheduledItem:
        if not isinstance(plan, dict):
            raise ValueError(f"{self.path}: every plan must be a mapping")

        plan_id = (
            str(plan["id"]) if plan.get("id") is not None else generate_entity_id()
        )
        kind = plan.get("kind") or ItemKind.PLAN
        if kind not in (ItemKind.PLAN, ItemKind.RECORD):
            raise ValueError(f"plan {plan_id}: unknown kind {kind!r}")

        deserialized_plan = {
            "id": plan_id,
            "kind": kind,
            "title": plan.get("title"),
            "start": self.__parse_instant(plan.get("start"), plan_id, "start"),
            "end": self.__parse_instant(plan.get("end"), plan_id, "end"),
            "is_draft": bool(plan.get("is_draft", False)),
            "color": plan.get("color"),
        }
        return cast(ScheduledItem, deserialized_plan)

    def __parse_instant(
        self, value: Any, plan_id: str, field: str
    ) -> Optional[pendulum.DateTime]:
        if value is None:
            return None
        # YAML already turns unquoted ISO timestamps into datetimes
        if isinstance(value, datetime.datetime):
            if value.tzinfo is None:
                return pendulum.instance(value, tz="local")
            return pendulum.instance(value).in_tz("local")
        if isinstance(value, str):
            try:
                parsed = pendulum.parse(value, tz="local")
            except ValueError as e:
                raise ValueError(f"plan {plan_id}: invalid {field} {value!r}") from e
            if isinstance(parsed, pendulum.DateTime):
                return parsed.in_tz("local")
        raise ValueError(f"plan {plan_id}: invalid {field} {value!r}")

    def get_all_plans(self) -> list[ScheduledItem]:
        return deepcopy(self.plans)
