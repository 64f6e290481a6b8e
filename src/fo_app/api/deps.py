# src/fo_app/api/deps.py
from typing import Annotated

from fastapi import Depends

from fo_app.core.config import Settings, get_settings

SettingsDep = Annotated[Settings, Depends(get_settings)]
