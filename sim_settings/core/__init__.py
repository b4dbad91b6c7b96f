"""
设置注册表核心模块

该子包包含设置加载的核心功能模块：
- constants: 运行模式、粒子种类等枚举
- errors: 错误类型
- document: 设置文档节点访问（XML / YAML）
- output: 控制台输出
- deprecation: 弃用字段与数据库路径优先级
- temperature: 温度设置解析
- distributions: 空间/角度/能量分布
- source: 外部源构建
- settings: 设置注册表
"""

# 常数
from .constants import (
    C_NONE,
    DEBUG,
    RunMode,
    ParticleKind,
    ElectronTreatment,
    ResScatMethod,
)

# 错误
from .errors import (
    SettingsError,
    ConfigError,
    SettingsFrozenError,
    format_error,
)

# 文档
from .document import (
    DocumentNode,
    XMLNode,
    MappingNode,
    load_document,
    parse_xml_string,
    parse_yaml_string,
)

# 输出
from .output import (
    warning,
    write_message,
    header,
    print_settings_summary,
)

# 弃用字段
from .deprecation import (
    LegacyPaths,
    PathCandidate,
    read_deprecated_paths,
    resolve_first_present,
    cross_sections_candidates,
    multipole_candidates,
    resolve_cross_sections_path,
    resolve_multipole_path,
)

# 温度
from .temperature import (
    TemperatureMethod,
    TemperatureSettings,
    read_temperature_settings,
)

# 分布
from .distributions import (
    SpatialDistribution,
    SpatialPoint,
    SpatialBox,
    AngleDistribution,
    Isotropic,
    Monodirectional,
    EnergyDistribution,
    Watt,
    Maxwell,
    Uniform,
    Discrete,
    Tabular,
    spatial_from_node,
    angle_from_node,
    energy_from_node,
)

# 外部源
from .source import (
    SourceSite,
    SourceDistribution,
    default_source,
    build_external_sources,
)

# 设置
from .settings import (
    Settings,
    SettingsView,
    load_settings,
)

__all__ = [
    # 常数
    'C_NONE',
    'DEBUG',
    'RunMode',
    'ParticleKind',
    'ElectronTreatment',
    'ResScatMethod',
    # 错误
    'SettingsError',
    'ConfigError',
    'SettingsFrozenError',
    'format_error',
    # 文档
    'DocumentNode',
    'XMLNode',
    'MappingNode',
    'load_document',
    'parse_xml_string',
    'parse_yaml_string',
    # 输出
    'warning',
    'write_message',
    'header',
    'print_settings_summary',
    # 弃用字段
    'LegacyPaths',
    'PathCandidate',
    'read_deprecated_paths',
    'resolve_first_present',
    'cross_sections_candidates',
    'multipole_candidates',
    'resolve_cross_sections_path',
    'resolve_multipole_path',
    # 温度
    'TemperatureMethod',
    'TemperatureSettings',
    'read_temperature_settings',
    # 分布
    'SpatialDistribution',
    'SpatialPoint',
    'SpatialBox',
    'AngleDistribution',
    'Isotropic',
    'Monodirectional',
    'EnergyDistribution',
    'Watt',
    'Maxwell',
    'Uniform',
    'Discrete',
    'Tabular',
    'spatial_from_node',
    'angle_from_node',
    'energy_from_node',
    # 外部源
    'SourceSite',
    'SourceDistribution',
    'default_source',
    'build_external_sources',
    # 设置
    'Settings',
    'SettingsView',
    'load_settings',
]
