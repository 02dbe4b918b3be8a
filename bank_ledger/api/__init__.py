"""
Bank Ledger API Application Factory
"""

from fastapi import FastAPI
import uvicorn

from .users import router as users_router
from .accounts import router as accounts_router
from .transfers import router as transfers_router
from .. import __version__


def create_app() -> FastAPI:
    """Create and configure the FastAPI application"""
    app = FastAPI(
        title="Bank Ledger API",
        description="Users, accounts and integer-unit balance operations",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.include_router(users_router, prefix="/users", tags=["Users"])
    app.include_router(accounts_router, prefix="/accounts", tags=["Accounts"])
    app.include_router(transfers_router, prefix="/transfers", tags=["Transfers"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": "bank_ledger_api",
            "version": __version__
        }

    @app.get("/")
    async def get_api_info():
        """Get API information"""
        return {
            "name": "Bank Ledger API",
            "version": __version__,
            "endpoints": {
                "docs": "/docs",
                "health": "/health",
                "users": "/users",
                "accounts": "/accounts",
                "transfers": "/transfers",
            }
        }

    return app


app = create_app()


def run_server(host: str = "0.0.0.0", port: int = 8090, debug: bool = False):
    """Run the FastAPI server"""
    uvicorn.run(
        "bank_ledger.api:app",
        host=host,
        port=port,
        reload=debug,
        log_level="info"
    )
