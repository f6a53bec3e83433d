import re
from typing import Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from loguru import Record

REDACTED = "[REDACTED]"

# the credentials a Jenkins client can leak into its own logs
BASIC_AUTH_HEADER = re.compile(r"Basic [A-Za-z0-9+/]{12,}={0,2}")
CREDENTIALS_IN_URL = re.compile(r"(?<=://)[^/\s:@]+:[^/\s@]+(?=@)")


class SensitiveLogFilter:
    """
    Masks Basic auth headers, `user:token@` url credentials and any
    registered secret in log messages.
    """

    def __init__(self) -> None:
        self.patterns: list[re.Pattern[str]] = [BASIC_AUTH_HEADER, CREDENTIALS_IN_URL]
        self._secrets: set[str] = set()

    def hide_sensitive_strings(self, *tokens: str) -> None:
        for token in (token.strip() for token in tokens):
            if not token or token in self._secrets:
                continue
            self._secrets.add(token)
            self.patterns.append(re.compile(re.escape(token)))

    def mask_string(self, string: str, full_hide: bool = False) -> str:
        # partial masking keeps a short prefix to tell secrets apart
        replace: Callable[[re.Match[str]], str] | str = (
            REDACTED if full_hide else lambda match: match.group()[:6] + REDACTED
        )
        for pattern in self.patterns:
            string = pattern.sub(replace, string)
        return string

    def create_filter(self, full_hide: bool = False) -> Callable[["Record"], bool]:
        def _filter(record: "Record") -> bool:
            record["message"] = self.mask_string(record["message"], full_hide)
            return True

        return _filter


sensitive_log_filter = SensitiveLogFilter()
