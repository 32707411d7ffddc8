# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Seeded from the show_header setting, then overridden by --no-header
_report_header_visible: ContextVar[bool] = ContextVar(
    "report_header_visible", default=True
)


def set_show_header(value: bool) -> None:
    _report_header_visible.set(value)


def get_show_header() -> bool:
    """Whether reports print the plangrid header for this invocation."""
    return _report_header_visible.get()
