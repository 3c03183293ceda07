"""Tests for KernelConfig, tolerance profiles and the GeometryKernel facade."""

import pytest
from pydantic import ValidationError

from planar_kernel import GeometryKernel, InsufficientPointsError, KernelConfig, Orientation
from planar_kernel.profiles import (
    get_profile_path,
    list_profiles,
    load_profile,
    save_profile,
    validate_profile_yaml,
)


class TestKernelConfig:
    """Pydantic settings model."""

    def test_defaults(self):
        config = KernelConfig()
        assert config.eps == 1e-9
        assert config.strict is False
        assert config.brute_force_cutoff == 3

    def test_eps_must_be_positive(self):
        with pytest.raises(ValidationError):
            KernelConfig(eps=0)

    def test_cutoff_lower_bound(self):
        with pytest.raises(ValidationError):
            KernelConfig(brute_force_cutoff=1)

    def test_frozen(self):
        config = KernelConfig()
        with pytest.raises(ValidationError):
            config.eps = 1e-3

    def test_from_yaml(self):
        config = KernelConfig.from_yaml("eps: 1.0e-6\nstrict: true\n")
        assert config.eps == pytest.approx(1e-6)
        assert config.strict is True

    def test_from_empty_yaml_uses_defaults(self):
        assert KernelConfig.from_yaml("") == KernelConfig()

    def test_merge_override(self):
        base = KernelConfig()
        merged = base.merge_override({"strict": True})
        assert merged.strict is True
        assert merged.eps == base.eps
        assert base.strict is False

    def test_none_override_resets_to_default(self):
        coarse = KernelConfig(eps=1e-6, brute_force_cutoff=6)
        merged = coarse.merge_override({"eps": None})
        assert merged.eps == KernelConfig().eps
        assert merged.brute_force_cutoff == 6

    def test_override_is_validated(self):
        with pytest.raises(ValidationError):
            KernelConfig().merge_override({"eps": -1.0})

    def test_unknown_setting_rejected(self):
        with pytest.raises(ValidationError):
            KernelConfig().merge_override({"epsilon": 1e-3})
        with pytest.raises(ValidationError):
            KernelConfig.from_yaml("eps: 1.0e-6\nstrcit: true\n")


class TestProfiles:
    """YAML profile loading."""

    def test_list_profiles(self):
        names = [p["name"] for p in list_profiles()]
        assert {"default", "strict", "coarse"} <= set(names)
        assert names == sorted(names)

    def test_descriptions_from_comment(self):
        descriptions = {p["name"]: p["description"] for p in list_profiles()}
        assert "tolerance" in descriptions["coarse"]

    def test_load_default(self):
        assert load_profile() == KernelConfig()

    def test_load_strict(self):
        assert load_profile("strict").strict is True

    def test_load_with_override(self):
        config = load_profile("coarse", override={"brute_force_cutoff": 5})
        assert config.eps == pytest.approx(1e-6)
        assert config.brute_force_cutoff == 5

    def test_missing_profile(self):
        with pytest.raises(FileNotFoundError):
            get_profile_path("does-not-exist")

    def test_save_and_reload(self, tmp_path):
        config = KernelConfig(eps=1e-7, strict=True)
        path = save_profile(config, "custom", directory=tmp_path)
        assert path.exists()
        assert KernelConfig.from_yaml(path.read_text()) == config

    def test_custom_directory_round_trip(self, tmp_path):
        config = KernelConfig(eps=1e-4, brute_force_cutoff=8)
        save_profile(config, "survey", directory=tmp_path, description="Survey-grade tolerance")
        assert list_profiles(tmp_path) == [
            {"name": "survey", "description": "Survey-grade tolerance"}
        ]
        assert load_profile("survey", directory=tmp_path) == config

    def test_profile_without_comment_has_empty_description(self, tmp_path):
        save_profile(KernelConfig(), "plain", directory=tmp_path)
        assert list_profiles(tmp_path)[0]["description"] == ""

    def test_override_reset_falls_back_to_default(self):
        assert load_profile("coarse", override={"eps": None}).eps == KernelConfig().eps

    def test_validate_yaml(self):
        assert validate_profile_yaml("eps: 1.0e-3\n") == (True, None)
        ok, message = validate_profile_yaml("eps: -1.0\n")
        assert not ok
        assert "eps" in message

    def test_validate_malformed_yaml(self):
        ok, message = validate_profile_yaml("eps: [1.0\n")
        assert not ok
        assert message

    def test_validate_non_mapping_yaml(self):
        ok, _ = validate_profile_yaml("- 1.0e-3\n")
        assert not ok


class TestGeometryKernel:
    """Facade passes its config through to every operation."""

    def test_default_kernel(self, square):
        kernel = GeometryKernel()
        assert kernel.polygon_area(square) == 100
        assert kernel.is_inside(square, (5, 5))
        assert kernel.polygon_area([(0, 0)]) == 0

    def test_strict_profile_raises(self):
        kernel = GeometryKernel.from_profile("strict")
        with pytest.raises(InsufficientPointsError):
            kernel.polygon_area([(0, 0), (1, 1)])
        with pytest.raises(InsufficientPointsError):
            kernel.closest_pair([(0, 0)])
        with pytest.raises(InsufficientPointsError):
            kernel.polygon_diameter([])

    def test_eps_applies_to_predicates(self):
        p, q, r = (0.0, 0.0), (1.0, 0.0), (2.0, 1e-4)
        assert GeometryKernel().orientation(p, q, r) == Orientation.COUNTERCLOCKWISE
        coarse = GeometryKernel(KernelConfig(eps=1e-3))
        assert coarse.orientation(p, q, r) == Orientation.COLLINEAR

    def test_algorithms(self, sample_cloud):
        kernel = GeometryKernel.from_profile("default", override={"brute_force_cutoff": 4})
        assert float(kernel.closest_pair(sample_cloud)) == pytest.approx(2 ** 0.5)
        assert len(kernel.convex_hull(sample_cloud)) >= 3
        assert kernel.find_closest_pair(sample_cloud).distance == pytest.approx(2 ** 0.5)
        assert float(kernel.find_diameter_pair(sample_cloud).distance) == pytest.approx(
            float(kernel.polygon_diameter(sample_cloud))
        )

    def test_segment_predicates(self):
        kernel = GeometryKernel()
        assert kernel.do_intersect((0, 0), (2, 2), (0, 2), (2, 0))
        assert kernel.on_segment((0, 0), (1, 1), (2, 2))

    def test_check_polygon(self, square):
        assert GeometryKernel().check_polygon(square).is_valid

    def test_repr(self):
        assert "strict=False" in repr(GeometryKernel())
