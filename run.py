"""
HTTP server entry point
Starts uvicorn on the configured PORT
"""
import uvicorn

from app.config import get_settings

if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=get_settings().port)
