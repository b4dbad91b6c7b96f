"""
设置注册表基本使用示例

这个示例展示了如何使用 sim_settings 包的基本功能。
"""

import numpy as np

# 导入主要模块
from sim_settings import (
    # 设置
    Settings,
    load_settings,
    print_settings_summary,

    # 常数
    RunMode,

    # 功能函数
    get_example_document,
    resolve_cross_sections_path,
    resolve_multipole_path,
    load_document,
)

# 导入子包
from sim_settings.testing import make_settings_root, make_source_element


def example_defaults():
    """默认设置示例"""
    print("=" * 60)
    print("默认设置示例")
    print("=" * 60)

    settings = Settings()
    print(f"\n温度方法: {settings.temperature_method.name}")
    print(f"默认温度: {settings.temperature_default} K")
    print(f"能量截断: {settings.energy_cutoff}")


def example_load_document():
    """从示例文档加载设置"""
    print("\n" + "=" * 60)
    print("从 settings.xml 加载")
    print("=" * 60)

    view = load_settings(get_example_document("settings.xml"))
    print_settings_summary(view)

    # 数据库路径：materials.xml > 环境变量 > settings.xml
    materials = load_document(get_example_document("materials.xml"))
    print(f"截面路径: {resolve_cross_sections_path(view, materials)}")
    print(f"多极库路径: {resolve_multipole_path(view, materials)}")


def example_sample_sources():
    """外部源抽样示例"""
    print("\n" + "=" * 60)
    print("外部源抽样示例")
    print("=" * 60)

    root = make_settings_root(sources=[
        make_source_element(space=("box", [-1, -1, -1, 1, 1, 1]), energy=("maxwell", [1.2895])),
    ])
    settings = Settings().load(root, run_mode=RunMode.FIXED_SOURCE)

    rng = np.random.default_rng(12345)
    source = settings.external_sources[0]
    energies = [source.sample(rng).E for _ in range(1000)]
    print(f"\n平均能量: {np.mean(energies):.3f}")


def main():
    example_defaults()
    example_load_document()
    example_sample_sources()


if __name__ == "__main__":
    main()
