"""
Backend Entry Point
Run with: python main.py
Or: uvicorn app.main:app --reload --port 3031
"""
import uvicorn

from app.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
    )
