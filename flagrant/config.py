"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from flagrant.engine.config import InterpreterConfig


class Settings(BaseSettings):
    flagrant_env: str = "development"
    flagrant_log_level: str = "info"

    # Canvas defaults (the original driver renders 400x300)
    canvas_width: int = 400
    canvas_height: int = 300
    background: str = "#000000"
    output_path: str = "out.png"

    # Interpreter policies
    strict_parens: bool = False
    skip_invalid_split_children: bool = True
    drop_undefined_references: bool = True

    # HTTP guard: 4096x4096
    max_canvas_pixels: int = 16_777_216

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def interpreter_config(self) -> InterpreterConfig:
        return InterpreterConfig(
            strict_parens=self.strict_parens,
            skip_invalid_split_children=self.skip_invalid_split_children,
            drop_undefined_references=self.drop_undefined_references,
        )


settings = Settings()
