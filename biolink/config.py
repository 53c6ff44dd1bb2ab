from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Supabase / PostgREST backend
    supabase_url: str = "https://your-project.supabase.co"
    supabase_anon_key: str = ""
    biolinks_table: str = "biolinks"
    shortlinks_table: str = "shortlinks"
    request_timeout: float = 10.0  # seconds

    # Prerender output
    site_name: str = "BioLink.ID"
    twitter_site: str = "@BioLinkID"
    default_favicon: str = "https://public-frontend-cos.metadl.com/mgx/img/favicon.png"
    cache_max_age: int = 300
    default_host: str = "biolink.id"  # used when a request carries no usable Host header
    # Only enable behind a proxy that overwrites X-Forwarded-Host / X-Forwarded-Proto
    trust_proxy_headers: bool = False
    index_html_path: Optional[str] = None  # built SPA index.html, when deployed alongside it

    # Short-link redirect page
    redirect_countdown: int = 3

    page_rate_limit: str = "120/minute"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
