import os
from pydantic import BaseModel, Field
from typing import Literal

class AppConfig(BaseModel):
    use_api: str = Field(default="http", description="Insight source: http, mock")
    api_base_url: str = Field(default="http://198.18.0.1:8080", description="Base URL of the analytics service")
    request_timeout: float = Field(default=30.0, gt=0, description="Seconds to wait for the analytics service")
    language: Literal["zh", "en"] = Field(default="zh", description="Display language for labels")
    output_dir: str = "outputs"

def load_config(json_path: str = "config_example.json") -> AppConfig:
    import json
    config_data = {}
    if os.path.exists(json_path):
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                config_data = json.load(f)
        except Exception as e:
            print(f"[CONFIG] Warning: Could not load {json_path}: {e}")

    # Environment variables override config file
    env_overrides = {
        "use_api": os.environ.get("VOXI_USE_API"),
        "api_base_url": os.environ.get("VOXI_API_BASE_URL"),
        "request_timeout": os.environ.get("VOXI_REQUEST_TIMEOUT"),
        "language": os.environ.get("VOXI_LANGUAGE"),
    }
    for key, value in env_overrides.items():
        if value:
            config_data[key] = value

    return AppConfig(**config_data)

CONFIG = load_config()
