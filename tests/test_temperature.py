"""
温度设置解析的单元测试
"""

import pytest

from sim_settings.core.errors import ConfigError
from sim_settings.core.temperature import (
    TemperatureMethod,
    TemperatureSettings,
    read_temperature_settings,
)
from sim_settings.testing import make_settings_root


class TestTemperatureMethod:
    """测试温度方法映射"""

    def test_known_tokens(self):
        assert TemperatureMethod.from_token("nearest") is TemperatureMethod.NEAREST
        assert TemperatureMethod.from_token("interpolation") is TemperatureMethod.INTERPOLATION

    def test_unknown_token_is_fatal(self):
        """未知方法不会被静默映射为默认值"""
        with pytest.raises(ConfigError, match="Unknown temperature method: bogus"):
            TemperatureMethod.from_token("bogus")


class TestReadTemperatureSettings:
    """测试温度字段读取"""

    def test_defaults(self):
        result = read_temperature_settings(make_settings_root())
        assert result == TemperatureSettings()
        assert result.default == 293.6
        assert result.method is TemperatureMethod.NEAREST
        assert result.tolerance == 10.0
        assert result.multipole is False
        assert result.range == (0.0, 0.0)

    def test_all_fields(self):
        root = make_settings_root(
            temperature_default=600.0,
            temperature_method="interpolation",
            temperature_tolerance=50.0,
            temperature_multipole=True,
            temperature_range=[300.0, 1500.0],
        )
        result = read_temperature_settings(root)
        assert result.default == 600.0
        assert result.method is TemperatureMethod.INTERPOLATION
        assert result.tolerance == 50.0
        assert result.multipole is True
        assert result.range == (300.0, 1500.0)

    def test_method_is_normalized(self):
        """比较前去除空白并转为小写"""
        root = make_settings_root(temperature_method="  INTERPOLATION ")
        assert read_temperature_settings(root).method is TemperatureMethod.INTERPOLATION

    def test_unknown_method(self):
        root = make_settings_root(temperature_method="bogus")
        with pytest.raises(ConfigError, match="bogus"):
            read_temperature_settings(root)

    def test_absent_fields_keep_current(self):
        current = TemperatureSettings(default=900.0, method=TemperatureMethod.INTERPOLATION)
        result = read_temperature_settings(make_settings_root(temperature_tolerance=5.0), current)
        assert result.default == 900.0
        assert result.method is TemperatureMethod.INTERPOLATION
        assert result.tolerance == 5.0

    def test_tolerance_not_bounded(self):
        root = make_settings_root(temperature_tolerance=-1.0)
        assert read_temperature_settings(root).tolerance == -1.0

    def test_non_numeric_tolerance(self):
        root = make_settings_root(temperature_tolerance="wide")
        with pytest.raises(ConfigError, match="temperature_tolerance"):
            read_temperature_settings(root)

    @pytest.mark.parametrize("values", [[300.0], [300.0, 600.0, 900.0], []])
    def test_range_needs_two_values(self, values):
        root = make_settings_root(temperature_range=values)
        with pytest.raises(ConfigError, match="temperature_range"):
            read_temperature_settings(root)

    @pytest.mark.parametrize("values", [[900.0, 300.0], "nan 300", "300 nan", "0 inf", "-inf 300"])
    def test_range_must_be_ordered(self, values):
        """上下界必须为有限值且有序（NaN 无法比较大小）"""
        root = make_settings_root(temperature_range=values)
        with pytest.raises(ConfigError, match="temperature_range"):
            read_temperature_settings(root)

    def test_equal_range_bounds(self):
        root = make_settings_root(temperature_range=[600.0, 600.0])
        assert read_temperature_settings(root).range == (600.0, 600.0)
