from typing import Any, Dict

import msgspec
from msgspec.structs import asdict

from .log_level import LogLevel


class Entry(msgspec.Struct, kw_only=True):
    """
    Base log entry. Subclasses add their own fields, all of which are
    available to templates by name.
    """

    message: str | None = None
    level: LogLevel

    def to_template(
        self,
        template: str,
        context: Dict[str, Any] | None = None,
    ) -> str:
        fields = asdict(self)
        fields["level"] = self.level.value

        if context:
            fields.update(context)

        return template.format(**fields)
