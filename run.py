"""Server run script."""

import uvicorn
from tft_notebook.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "tft_notebook.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
