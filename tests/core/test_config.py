import pytest

from core.models.errors import ConfigurationError
from core.utils.config import ServiceConfig


class TestServiceConfigFromEnv:
    def test_minimal_environment(self) -> None:
        config = ServiceConfig.from_env({"TARGET_BUCKET_NAME": "resized"})

        assert config.target_bucket == "resized"
        assert config.region == "us-east-1"
        assert config.endpoint_url is None
        assert config.url_expires_in == 3600
        assert config.max_dimension == 10_000
        assert config.jpeg_quality == 85
        assert config.is_development is False

    def test_all_settings(self) -> None:
        config = ServiceConfig.from_env(
            {
                "TARGET_BUCKET_NAME": " resized ",
                "AWS_REGION": "eu-central-1",
                "AWS_ENDPOINT_URL": "http://localhost:4566",
                "ENVIRONMENT": "Development",
                "DOWNLOAD_URL_EXPIRES_IN": "600",
                "MAX_IMAGE_DIMENSION": "2048",
                "JPEG_QUALITY": "70",
            }
        )

        assert config.target_bucket == "resized"
        assert config.region == "eu-central-1"
        assert config.endpoint_url == "http://localhost:4566"
        assert config.url_expires_in == 600
        assert config.max_dimension == 2048
        assert config.jpeg_quality == 70
        assert config.is_development is True

    @pytest.mark.parametrize("environ", [{}, {"TARGET_BUCKET_NAME": ""}, {"TARGET_BUCKET_NAME": "  "}])
    def test_missing_bucket(self, environ) -> None:
        with pytest.raises(ConfigurationError) as exc:
            ServiceConfig.from_env(environ)

        assert exc.value.message == "TARGET_BUCKET_NAME environment variable is not set"

    def test_invalid_numeric_setting(self) -> None:
        with pytest.raises(ConfigurationError) as exc:
            ServiceConfig.from_env({"TARGET_BUCKET_NAME": "b", "JPEG_QUALITY": "high"})

        assert exc.value.message == "Invalid service configuration"

    def test_reads_process_environment_by_default(self, monkeypatch) -> None:
        monkeypatch.setenv("TARGET_BUCKET_NAME", "from-process")

        assert ServiceConfig.from_env().target_bucket == "from-process"

    def test_config_is_immutable(self) -> None:
        config = ServiceConfig(target_bucket="b")

        with pytest.raises(Exception):
            config.target_bucket = "other"  # type: ignore[misc]
