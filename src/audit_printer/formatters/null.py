"""Formatter that renders nothing."""


def render_nothing(value) -> str:
    return ""


def null_formatter() -> dict:
    return {"pretty": render_nothing, "html": render_nothing}
