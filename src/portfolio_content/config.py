"""
Configuration settings for the content client.
Environment variables override defaults.
"""
import os
from dataclasses import dataclass, field
from typing import List


@dataclass
class Settings:
    """Content client configuration"""

    # WordPress REST root, e.g. https://my-wordpress.com/wp-json
    WP_API_URL: str = "https://tu-sitio.com/wp-json"

    # Formatting
    LOCALE: str = "es"
    SKILL_FALLBACK_CATEGORY: str = "Other"

    # Logging
    LOG_LEVEL: str = "WARNING"

    # Preview API server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type == bool:
                    setattr(self, key, env_value.lower() in ("true", "1", "yes"))
                elif field_type == int:
                    setattr(self, key, int(env_value))
                elif field_type == List[str]:
                    setattr(self, key, [v.strip() for v in env_value.split(",") if v.strip()])
                else:
                    setattr(self, key, env_value)


# Resolved once at import; treat as read-only afterwards.
settings = Settings()
