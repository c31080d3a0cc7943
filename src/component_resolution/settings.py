"""Distribution endpoint settings.

Endpoint literals are configuration, not computed. Apps may inject their own
ComponentSettings (e.g., a test bucket); DEFAULT_SETTINGS holds the published
endpoints.
"""

from pydantic import BaseModel
from pydantic import ConfigDict

REGION_PLACEHOLDER = "{Region}"


class ComponentSettings(BaseModel):
    """Endpoint templates and partition rule for component distribution."""

    model_config = ConfigDict(frozen=True)

    # Standard partition, every placeholder replaced by the instance region
    component_url: str = f"https://s3.{REGION_PLACEHOLDER}.amazonaws.com/amazon-ssm-{REGION_PLACEHOLDER}/Components"

    # Restricted partition: different domain suffix
    restricted_component_url: str = (
        f"https://s3.{REGION_PLACEHOLDER}.amazonaws.com.cn/amazon-ssm-{REGION_PLACEHOLDER}/Components"
    )

    region_placeholder: str = REGION_PLACEHOLDER
    restricted_region_prefix: str = "cn-"


DEFAULT_SETTINGS = ComponentSettings()
