from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from src.lib.db_con import get_session


GetSession = Annotated[Session, Depends(get_session)]
