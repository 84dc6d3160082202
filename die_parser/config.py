from pydantic_settings import BaseSettings, SettingsConfigDict

# Die types found in a standard polyhedral set, plus coins.
STANDARD_DIE_TYPES: tuple[int, ...] = (2, 4, 6, 8, 10, 12, 20, 100)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DIE_PARSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Upper bound on dice per roll enforced by validation. 0 disables the limit.
    max_dice: int = 100

    # Side counts accepted by validation. Parsing alone accepts any positive count.
    allowed_sides: list[int] = list(STANDARD_DIE_TYPES)


settings = Settings()
