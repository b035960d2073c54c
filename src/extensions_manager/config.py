from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

NPM_SEARCH_URL = "https://registry.npmjs.org/-/v1/search"
NPM_PACKAGE_INFO_URL = "https://registry.npmjs.org/"
NPM_PACKAGE_PAGE_URL = "https://www.npmjs.com/package"


class ExtensionsConfig(BaseModel):
    """Settings for an extensions manager. JSON files use the camelCase aliases."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    extension_types: list[str] = Field([], alias="extensionTypes")
    install_path: Path = Field(Path("."), alias="installPath")
    default_scheme_path: str = Field("/etc/scheme.json", alias="defaultSchemePath")
    default_icon_path: str = Field("/etc/icon.svg", alias="defaultIconPath")
    search_url: str = Field(NPM_SEARCH_URL, alias="searchURL")
    search_by_package_name_url: str = Field(NPM_PACKAGE_INFO_URL, alias="searchByPackageNameURL")
    package_url: str = Field(NPM_PACKAGE_PAGE_URL, alias="packageURL")
    cli_command_timeout: float = Field(120.0, alias="cliCommandTimeout", gt=0)  # seconds
    npm_executable: str = Field("npm", alias="npmExecutable")
