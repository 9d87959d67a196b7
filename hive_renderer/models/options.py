"""
Renderer configuration models.

Options and localization are validated once, when a renderer is built, so a
bad configuration fails at construction instead of in the middle of a render.
"""

from typing import Callable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import ASSETS_HEIGHT, ASSETS_WIDTH, BASE_URL, BREAKS, IPFS_PREFIX
from ..plugins import DEFAULT_PLUGINS, RendererPlugin


def _identity_proxy(url: str) -> str:
    return url


def _default_hashtag_url(hashtag: str) -> str:
    return f"/trending/{hashtag}"


def _default_usertag_url(account: str) -> str:
    return f"/@{account}"


def _never_safe(url: str) -> bool:
    return False


def _always_external(url: str) -> bool:
    return True


class RendererOptions(BaseModel):
    """Immutable configuration for one renderer instance."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    base_url: str = Field(default=BASE_URL, min_length=1)
    breaks: bool = BREAKS
    skip_sanitization: bool = False
    allow_insecure_script_tags: bool = False
    add_nofollow_to_links: bool = True
    add_target_blank_to_links: Optional[bool] = True
    css_class_for_internal_links: Optional[str] = None
    css_class_for_external_links: Optional[str] = None
    do_not_show_images: bool = False
    ipfs_prefix: Optional[str] = IPFS_PREFIX
    assets_width: int = Field(default=ASSETS_WIDTH, gt=0)
    assets_height: int = Field(default=ASSETS_HEIGHT, gt=0)
    image_proxy_fn: Callable[[str], str] = _identity_proxy
    hashtag_url_fn: Callable[[str], str] = _default_hashtag_url
    usertag_url_fn: Callable[[str], str] = _default_usertag_url
    is_link_safe_fn: Callable[[str], bool] = _never_safe
    add_external_css_class_to_matching_links_fn: Callable[[str], bool] = _always_external
    plugins: Tuple[RendererPlugin, ...] = DEFAULT_PLUGINS

    @field_validator("plugins")
    @classmethod
    def validate_plugins(cls, v):
        for plugin in v:
            name = getattr(plugin, "name", None)
            if not isinstance(name, str) or not name:
                raise ValueError("Every plugin needs a non-empty name")
        return v


class Localization(BaseModel):
    """User-facing strings emitted into rendered markup."""

    model_config = ConfigDict(frozen=True)

    phishing_warning: str = Field(
        default="Link expanded to plain text; beware of a potential phishing attempt",
        min_length=1,
    )
    external_link: str = Field(
        default="This link will take you away from example.com", min_length=1
    )
    no_image: str = Field(default="Images not allowed", min_length=1)
    account_name_wrong_length: str = Field(
        default="Account name should be between 3 and 16 characters long", min_length=1
    )
    account_name_bad_actor: str = Field(
        default="This account is on a bad actor list", min_length=1
    )
    account_name_wrong_segment: str = Field(
        default="This account name contains a bad segment", min_length=1
    )


DEFAULT_LOCALIZATION = Localization()
