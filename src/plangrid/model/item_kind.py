# SPDX-License-Identifier: MIT


class ItemKind:
    PLAN = "plan"
    RECORD = "record"
