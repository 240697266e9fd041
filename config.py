"""
Runtime configuration loaded from environment variables and .env
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_QR_URL_TEMPLATE = (
    "https://img.vietqr.io/image/{merchant_id}-compact2.png"
    "?amount={amount}&addInfo={note}&accountName={merchant_name}"
)


def _env_bool(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration"""
    table_number_min: int = 1
    table_number_max: int = 50
    currency: str = "VND"
    merchant_id: str = "970422-0000000000"
    merchant_name: str = "JSC ORDERING"
    payment_note: str = "Thanh toan don hang"
    payment_qr_url_template: str = DEFAULT_QR_URL_TEMPLATE
    log_level: str = "INFO"
    secret_key: str = "your-secret-key-here"
    port: int = 5000
    debug: bool = False

    def __post_init__(self):
        # table numbers are positive integers
        if self.table_number_min < 1:
            raise ValueError("TABLE_NUMBER_MIN must be at least 1")
        if self.table_number_max < self.table_number_min:
            raise ValueError("TABLE_NUMBER_MAX must not be lower than TABLE_NUMBER_MIN")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build configuration from the process environment (.env included)"""
        load_dotenv()
        return cls(
            table_number_min=int(os.getenv("TABLE_NUMBER_MIN", "1")),
            table_number_max=int(os.getenv("TABLE_NUMBER_MAX", "50")),
            currency=os.getenv("CURRENCY", "VND").upper(),
            merchant_id=os.getenv("MERCHANT_ID", cls.merchant_id),
            merchant_name=os.getenv("MERCHANT_NAME", cls.merchant_name),
            payment_note=os.getenv("PAYMENT_NOTE", cls.payment_note),
            payment_qr_url_template=os.getenv("PAYMENT_QR_URL_TEMPLATE", DEFAULT_QR_URL_TEMPLATE),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            secret_key=os.getenv("SECRET_KEY", cls.secret_key),
            port=int(os.getenv("PORT", "5000")),
            debug=_env_bool("DEBUG")
        )
