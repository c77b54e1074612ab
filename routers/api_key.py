# routers/api_key.py
from fastapi import Depends, Header, HTTPException, status

from config import Settings, get_settings

def get_api_key(api_key: str = Header(..., alias="api-key"),
                settings: Settings = Depends(get_settings)):
    if api_key not in settings.api_keys:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API Key")
    return api_key
