from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.core.config import settings
from storefront.core.logger import setup_logging
from storefront.middleware.output_capture import OutputCaptureMiddleware

from storefront.api.products import router as products_router
from storefront.api.inventory import router as inventory_router


setup_logging()


# -------------------------------------------------
# Create FastAPI App
# -------------------------------------------------

app = FastAPI(title="Storefront Catalog Middleware")


# -------------------------------------------------
# Add Middleware (IMPORTANT ORDER)
# -------------------------------------------------

app.add_middleware(OutputCaptureMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS or ["*"],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# -------------------------------------------------
# Include Routers
# -------------------------------------------------

app.include_router(products_router)
app.include_router(inventory_router)


# -------------------------------------------------
# Health Check
# -------------------------------------------------

@app.get("/health")
def health():
    return {
        "status": "ok",
        "message": "Storefront catalog middleware is running",
    }
