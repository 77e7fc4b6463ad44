"""
Recipe Box API - recipe extraction, import and scaling over HTTP
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .recipes import router as recipes_router
from .scaling import router as scaling_router

# Create FastAPI app
app = FastAPI(
    title="Recipe Box API",
    description="Extract recipes from web pages, import recipe documents and scale ingredient lists.",
    version="0.1.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recipes_router, prefix="/api", tags=["recipes"])
app.include_router(scaling_router, prefix="/api", tags=["scaling"])


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {
        "service": "Recipe Box API",
        "status": "healthy",
        "version": "0.1.0",
        "endpoints": [
            "POST /api/scrape",
            "POST /api/extract",
            "POST /api/recipes/import",
            "POST /api/scale"
        ]
    }
