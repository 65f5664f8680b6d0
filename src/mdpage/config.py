"""mdpage configuration system.

Configuration is YAML-based with a handful of CLI overrides (--document, --host,
--port, --output). Supports environment variable substitution (${VAR}) in
config files.

Configuration file discovery (in priority order):
1. CLI --config argument
2. ./.mdpage/config.yaml
3. ./mdpage.yaml
"""

import codecs
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# GitHub-flavoured behaviour: strikethrough, bare-URL links, task lists,
# fences nested in lists and two-space list nesting
DEFAULT_EXTENSIONS: list[str] = [
    "tables",
    "toc",
    "pymdownx.highlight",
    "pymdownx.superfences",
    "pymdownx.tilde",
    "pymdownx.magiclink",
    "pymdownx.tasklist",
    "mdx_truly_sane_lists",
]

DEFAULT_EXTENSION_CONFIGS: dict[str, dict[str, Any]] = {
    "pymdownx.highlight": {"use_pygments": False},
}

DEFAULT_STYLESHEET = (
    "https://cdnjs.cloudflare.com/ajax/libs/github-markdown-css/5.5.1/github-markdown.min.css"
)

VALID_COLOR_MODES = {"auto", "light", "dark"}

# =============================================================================
# Configuration Dataclasses
# =============================================================================


@dataclass
class DocumentConfig:
    """Source document configuration.

    The path is a trusted, operator-supplied value. Relative paths are
    resolved against the working directory each time the document is read.

    Attributes:
        path: Markdown file to render
        encoding: Text encoding of the file
    """

    path: str = "README.md"
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Validate document configuration."""
        if not str(self.path).strip():
            raise ValueError("Document path must not be empty")
        if not self.encoding:
            raise ValueError("Document encoding must not be empty")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown document encoding: {self.encoding}") from e


@dataclass
class MarkupConfig:
    """Markdown engine configuration.

    Attributes:
        extensions: Python-Markdown extension names
        extension_configs: Per-extension settings, keyed by extension name
    """

    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    extension_configs: dict[str, dict[str, Any]] = field(
        default_factory=lambda: {k: dict(v) for k, v in DEFAULT_EXTENSION_CONFIGS.items()}
    )


@dataclass
class LogoConfig:
    """Banner image reference. The image itself is served elsewhere."""

    src: str = "/logo.svg"
    width: int = 128
    height: int = 128
    alt: str = "the Fresh logo: a sliced lemon dripping with juice"

    def __post_init__(self) -> None:
        """Validate logo dimensions."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Logo dimensions must be positive (got {self.width}x{self.height})"
            )


@dataclass
class PageConfig:
    """Header banner configuration.

    Attributes:
        title: Banner heading
        subtitle: Line shown below the heading
        head_title: Text of the HTML <title> element
        logo: Banner image reference
    """

    title: str = "Mastering Next.js Interview"
    subtitle: str = "100 Essential Interview Questions and Answers"
    head_title: str = "README"
    logo: LogoConfig = field(default_factory=LogoConfig)


@dataclass
class ThemeConfig:
    """Presentation settings. Values are emitted verbatim into the page.

    Attributes:
        stylesheets: Stylesheet hrefs linked from the page head
        color_mode: data-color-mode value (auto, light, dark)
        light_theme: data-light-theme value
        dark_theme: data-dark-theme value
    """

    stylesheets: list[str] = field(default_factory=lambda: [DEFAULT_STYLESHEET])
    color_mode: str = "auto"
    light_theme: str = "light"
    dark_theme: str = "dark"

    def __post_init__(self) -> None:
        """Validate theme configuration."""
        if self.color_mode not in VALID_COLOR_MODES:
            raise ValueError(
                f"Invalid color mode: {self.color_mode}. Valid: {sorted(VALID_COLOR_MODES)}"
            )


@dataclass
class ServerConfig:
    """HTTP server configuration."""

    host: str = "127.0.0.1"
    port: int = 8000

    def __post_init__(self) -> None:
        """Validate server configuration."""
        if not 1 <= self.port <= 65535:
            raise ValueError(f"Invalid port: {self.port}")


@dataclass
class MdpageConfig:
    """Top-level mdpage configuration.

    Attributes:
        document: Source document settings
        markup: Markdown engine settings
        page: Header banner content
        theme: Presentation strings
        server: HTTP server settings
    """

    document: DocumentConfig = field(default_factory=DocumentConfig)
    markup: MarkupConfig = field(default_factory=MarkupConfig)
    page: PageConfig = field(default_factory=PageConfig)
    theme: ThemeConfig = field(default_factory=ThemeConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    # Set when loaded from a file
    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path


# =============================================================================
# Environment Variable Substitution
# =============================================================================

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(value: Any) -> Any:
    """Substitute environment variables in config values.

    Supports ${VAR} syntax, e.g. ``path: "${DOCS_DIR}/README.md"``.

    Args:
        value: Config value (string, dict, list, or other)

    Returns:
        Value with environment variables substituted

    Raises:
        ValueError: If a referenced variable is not set
    """
    if isinstance(value, str):

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ValueError(f"Environment variable not set: {var_name}")
            return env_value

        return _ENV_VAR_RE.sub(replace_var, value)

    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [substitute_env_vars(v) for v in value]

    return value


# =============================================================================
# Config File Discovery
# =============================================================================


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find configuration file in standard locations.

    Search order:
    1. ./.mdpage/config.yaml
    2. ./mdpage.yaml

    Args:
        start_path: Starting directory for search (defaults to cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    start_path = start_path.resolve()

    candidates = [
        start_path / ".mdpage" / "config.yaml",
        start_path / "mdpage.yaml",
    ]

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return None


# =============================================================================
# Config Loading
# =============================================================================


def load_config_from_dict(data: dict[str, Any]) -> MdpageConfig:
    """Load configuration from a dictionary.

    Missing sections and keys fall back to defaults.

    Args:
        data: Configuration dictionary

    Returns:
        MdpageConfig instance
    """
    data = substitute_env_vars(data)

    config = MdpageConfig()

    if "document" in data:
        document_data = data["document"] or {}
        config.document = DocumentConfig(
            path=str(document_data.get("path", config.document.path)),
            encoding=document_data.get("encoding", config.document.encoding),
        )

    if "markup" in data:
        markup_data = data["markup"] or {}
        config.markup = MarkupConfig(
            extensions=list(markup_data.get("extensions", config.markup.extensions)),
            extension_configs=dict(
                markup_data.get("extension_configs", config.markup.extension_configs)
            ),
        )

    if "page" in data:
        page_data = data["page"] or {}
        logo_data = page_data.get("logo") or {}
        defaults = PageConfig()
        config.page = PageConfig(
            title=page_data.get("title", defaults.title),
            subtitle=page_data.get("subtitle", defaults.subtitle),
            head_title=page_data.get("head_title", defaults.head_title),
            logo=LogoConfig(
                src=logo_data.get("src", defaults.logo.src),
                width=int(logo_data.get("width", defaults.logo.width)),
                height=int(logo_data.get("height", defaults.logo.height)),
                alt=logo_data.get("alt", defaults.logo.alt),
            ),
        )

    if "theme" in data:
        theme_data = data["theme"] or {}
        config.theme = ThemeConfig(
            stylesheets=list(theme_data.get("stylesheets", config.theme.stylesheets)),
            color_mode=theme_data.get("color_mode", config.theme.color_mode),
            light_theme=theme_data.get("light_theme", config.theme.light_theme),
            dark_theme=theme_data.get("dark_theme", config.theme.dark_theme),
        )

    if "server" in data:
        server_data = data["server"] or {}
        config.server = ServerConfig(
            host=server_data.get("host", config.server.host),
            port=int(server_data.get("port", config.server.port)),
        )

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> MdpageConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for config file if not specified

    Returns:
        MdpageConfig instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is not None:
        with open(found_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config = load_config_from_dict(data)
        config._config_path = found_path
    else:
        config = MdpageConfig()

    return config


def create_default_config() -> str:
    """Create default configuration YAML content.

    Returns:
        YAML string with default configuration and comments
    """
    return f'''# mdpage configuration

# Markdown document to render (relative to the working directory)
document:
  path: "README.md"
  encoding: "utf-8"

# Python-Markdown extensions
markup:
  extensions: {DEFAULT_EXTENSIONS!r}
  extension_configs:
    pymdownx.highlight:
      use_pygments: false

# Header banner
page:
  title: "Mastering Next.js Interview"
  subtitle: "100 Essential Interview Questions and Answers"
  head_title: "README"
  logo:
    src: "/logo.svg"
    width: 128
    height: 128
    alt: "the Fresh logo: a sliced lemon dripping with juice"

# Presentation (emitted verbatim)
theme:
  stylesheets:
    - "{DEFAULT_STYLESHEET}"
  color_mode: "auto"   # auto, light, dark
  light_theme: "light"
  dark_theme: "dark"

# mdpage serve
server:
  host: "127.0.0.1"
  port: 8000
'''
