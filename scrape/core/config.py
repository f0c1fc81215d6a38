import os

class Settings:
    # Output
    PRINT_HEADERS: bool = os.getenv("HEADERS", "0").lower() in ("1", "true", "yes")
    THEME: str = os.getenv("SCRAPE_THEME", "monokai")

    # Diagnostics: any value turns verbose output on
    LOG_ENABLED: bool = os.getenv("SCRAPE_LOG") is not None

    # Browser emulation (--mozilla)
    USER_AGENT: str = os.getenv("SCRAPE_USER_AGENT", "Mozilla/5.0")
    ACCEPT: str = os.getenv("SCRAPE_ACCEPT", "text/html,application/xhtml+xml,application/xml")

    # Charset used when the response does not declare one
    DEFAULT_ENCODING: str = os.getenv("SCRAPE_DEFAULT_ENCODING", "utf-8")

    VERSION: str = "0.1.0"

settings = Settings()
