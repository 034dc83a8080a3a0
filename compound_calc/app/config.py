"""Default configuration; override with COMPOUND_CALC_* environment variables."""


class Config:
    # front-end dev servers allowed to call /api/*
    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]
    BREAKDOWN_ROWS = 11
    LOG_LEVEL = "INFO"
