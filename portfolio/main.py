# portfolio\main.py
from portfolio.adapters.api.main import create_app

# Entry point for Uvicorn: `uvicorn portfolio.main:app`
app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "portfolio.adapters.api.main:create_app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        factory=True,
    )
