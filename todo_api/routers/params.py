from typing import Annotated

from fastapi import Path

# largest value a signed 64-bit integer column holds
MAX_ID = 2**63 - 1

ResourceId = Annotated[int, Path(ge=1, le=MAX_ID)]
