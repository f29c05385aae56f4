"""
Configuration validation for Advertizer construction.
"""
import pytest
from pydantic import ValidationError
from advertizer import Advertizer, AdvertizerConfig, InvalidConfigurationError


@pytest.mark.parametrize("value", [0, -1, -100])
def test_rejects_non_positive_max(value):
    with pytest.raises(InvalidConfigurationError):
        Advertizer(value)


@pytest.mark.parametrize("value", [1.5, "3", None, True])
def test_rejects_non_integer_max(value):
    with pytest.raises(InvalidConfigurationError):
        Advertizer(value)


def test_error_is_value_error_with_cause():
    with pytest.raises(ValueError) as exc_info:
        Advertizer(0)
    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_accepts_positive_max():
    adv = Advertizer(3)
    assert adv.max_advertisements == 3
    assert adv.config == AdvertizerConfig(max_advertisements=3)
    assert adv.length() == 0


def test_from_config():
    config = AdvertizerConfig(max_advertisements=2)
    adv = Advertizer.from_config(config)
    assert adv.config is config
    adv.push(1, "one")
    assert adv.advertize() == (1, "one", True)
    assert adv.advertize() == (1, "one", True)
    assert adv.advertize() == (None, None, False)


def test_config_is_frozen():
    config = AdvertizerConfig(max_advertisements=2)
    with pytest.raises(ValidationError):
        config.max_advertisements = 5
