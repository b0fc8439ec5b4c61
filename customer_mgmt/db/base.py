from typing import Any

from sqlalchemy.orm import as_declarative


# Models name their tables explicitly (plural: customers, addresses, ...).
@as_declarative()
class Base:
    id: Any
    __name__: str
