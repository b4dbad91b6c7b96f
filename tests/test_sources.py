"""
外部源构建的单元测试
"""

import numpy as np
import pytest

from sim_settings.core.distributions import (
    Isotropic,
    Monodirectional,
    SpatialBox,
    SpatialPoint,
    Uniform,
    Watt,
)
from sim_settings.core.errors import ConfigError
from sim_settings.core.source import (
    SourceDistribution,
    SourceSite,
    build_external_sources,
    default_source,
)
from sim_settings.testing import make_settings_root, make_source_element


class TestDefaultSource:
    """测试默认源"""

    def test_default_source(self):
        source = default_source()
        assert source.space == SpatialPoint((0.0, 0.0, 0.0))
        assert source.angle == Isotropic()
        assert source.energy == Watt(0.988, 2.249e-6)
        assert source.strength == 1.0

    def test_default_sources_not_shared(self):
        assert default_source() is not default_source()


class TestBuildExternalSources:
    """测试外部源列表构建"""

    def test_no_sources_gives_one_default(self):
        sources = build_external_sources(make_settings_root())
        assert len(sources) == 1
        assert sources[0] == default_source()

    def test_document_order_preserved(self):
        root = make_settings_root(sources=[
            make_source_element(space=("point", [float(i), 0.0, 0.0]), strength=i + 1)
            for i in range(3)
        ])
        sources = build_external_sources(root)
        assert len(sources) == 3
        assert [s.space.xyz[0] for s in sources] == [0.0, 1.0, 2.0]
        assert [s.strength for s in sources] == [1.0, 2.0, 3.0]

    def test_no_default_with_document_sources(self):
        """只要文档中有源就不追加默认源"""
        root = make_settings_root(sources=[make_source_element(energy=("uniform", [1.0, 2.0]))])
        sources = build_external_sources(root)
        assert len(sources) == 1
        assert sources[0].energy == Uniform(1.0, 2.0)
        assert default_source() not in sources

    def test_fresh_list_each_call(self):
        root = make_settings_root()
        assert build_external_sources(root) is not build_external_sources(root)

    def test_malformed_source_propagates(self):
        root = make_settings_root(sources=[
            make_source_element(),
            make_source_element(space=("box", [0.0, 0.0])),
        ])
        with pytest.raises(ConfigError, match="box"):
            build_external_sources(root)


class TestSourceDistribution:
    """测试单个源"""

    def test_missing_parts_use_defaults(self):
        root = make_settings_root(sources=[make_source_element()])
        source = SourceDistribution.from_node(root.child("source"))
        assert source == default_source()

    def test_full_source(self):
        root = make_settings_root(sources=[make_source_element(
            space=("box", [-1, -1, -1, 1, 1, 1]),
            angle=("monodirectional", [0, 1, 0]),
            energy=("watt", [0.988e6, 2.249e-6]),
            strength=0.5,
        )])
        source = SourceDistribution.from_node(root.child("source"))
        assert source.space == SpatialBox((-1.0, -1.0, -1.0), (1.0, 1.0, 1.0))
        assert source.angle == Monodirectional((0.0, 1.0, 0.0))
        assert source.energy == Watt(0.988e6, 2.249e-6)
        assert source.strength == 0.5

    def test_negative_strength(self):
        root = make_settings_root(sources=[make_source_element(strength=-1.0)])
        with pytest.raises(ConfigError, match="strength"):
            SourceDistribution.from_node(root.child("source"))

    def test_sample(self):
        rng = np.random.default_rng(7)
        site = default_source().sample(rng)
        assert isinstance(site, SourceSite)
        np.testing.assert_array_equal(site.r, [0.0, 0.0, 0.0])
        assert np.linalg.norm(site.u) == pytest.approx(1.0)
        assert site.E >= 0.0
        assert site.wgt == 1.0

    def test_describe(self):
        text = default_source().describe()
        assert "point" in text
        assert "isotropic" in text
        assert "watt" in text
