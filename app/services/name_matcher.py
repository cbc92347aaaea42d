# app/services/name_matcher.py
"""
Turns a free-text name query into the fragments used by customer search.

One word matches against first OR last name; two words are read as
"first last". Capitalization is naive: only the first character of each
fragment is upper-cased, so matching stays case-sensitive beyond it.
"""
from typing import NamedTuple, Optional, Tuple

from app.core.exceptions import EmptySearchQueryError


class NameQuery(NamedTuple):
    first: str
    last: Optional[str] = None

    @property
    def is_single_word(self) -> bool:
        return self.last is None

    def patterns(self) -> Tuple[str, ...]:
        # % and _ inside a fragment are left as LIKE wildcards
        if self.is_single_word:
            return (f"%{self.first}%",)
        return (f"%{self.first}%", f"%{self.last}%")


def capitalize_fragment(token: str) -> str:
    return token[:1].upper() + token[1:]


def parse_name_query(raw: str) -> NameQuery:
    tokens = raw.split()
    if not tokens:
        raise EmptySearchQueryError("Search query must contain at least one name")

    if len(tokens) == 1:
        return NameQuery(first=capitalize_fragment(tokens[0]))

    # Anything past the second word is ignored
    return NameQuery(
        first=capitalize_fragment(tokens[0]),
        last=capitalize_fragment(tokens[1]),
    )
