from settings.okx import okx_settings

__all__ = ["okx_settings"]
