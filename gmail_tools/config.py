from pydantic_settings import BaseSettings, SettingsConfigDict
from gmail_tools.utils.logger import logger


class Config(BaseSettings):
    package_name: str = "gmail_tools"
    log_level: str = "INFO"
    log_file: str = "server.log"
    host: str = "127.0.0.1"
    port: int = 8080

    # Gmail API
    user_id: str = "me"
    default_max_results: int = 10

    # MIME codec
    max_part_depth: int = 64
    boundary_prefix: str = "----=_NextPart_"
    strict_mime_type: bool = False  # keep an explicit text/html even when htmlBody is given

    model_config = SettingsConfigDict(env_prefix="GMAIL_TOOLS_")


CFG = Config()

logger.setLevel(CFG.log_level)
logger.info(f"Config: {CFG}")
