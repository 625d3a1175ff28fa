from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "protected_namespaces": ("settings_",),
    }

    # Jurisdiction used when a request or CLI run doesn't name one
    default_region: str = "ZA"

    # Modeling options (see ModelingOptions)
    include_closing_costs_in_renter_initial_investment: bool = False
    model_buyer_side_investment: bool = True

    # App
    api_title: str = "Buy vs Rent Analyzer"
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
