import uvicorn
from atlas.core.config import settings


def main():
    """Start the Atlas API server."""
    uvicorn.run("atlas.main:app", host=settings.HOST, port=settings.PORT, reload=True)


if __name__ == "__main__":
    main()
