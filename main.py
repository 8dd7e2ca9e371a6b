"""Entry point for the Video Idea Evaluator service."""

if __name__ == "__main__":
    import uvicorn
    from app.core.config import settings

    print(f"Starting {settings.api_title} v{settings.api_version}")
    print(f"YouTube API key configured: {bool(settings.youtube_api_key)}")
    print(f"Title model: {settings.openai_model if settings.openai_api_key else 'fallback titles only'}")
    print(f"Log level: {settings.log_level}")

    uvicorn.run(
        "app.main:app",  # Use string import for hot reload
        host="0.0.0.0",
        port=8000,
        reload=settings.debug_mode,
        log_level=settings.log_level.lower()
    )
