"""
ManifestBuilder Tests

폴더 트리 → data.json 문서 생성 테스트
"""
import json

import pytest

from gallery.common.errors import ManifestRootError
from gallery.domain.manifest.builder import ManifestBuilder, title_sort_key, utc_timestamp
from tests.test_helpers import (
    RELEASE_REPO,
    assert_manifest_invariants,
    find_project,
    image_names,
    make_project,
)


class TestManifestShape:
    """data.json 구조 / 불변식"""

    def test_sample_manifest(self, builder, sample_portfolio):
        doc = builder.build(sample_portfolio).to_json_dict()

        assert doc["generated"] == "2026-01-02T08:00:00.000Z"
        assert_manifest_invariants(doc)
        assert [c["name"] for c in doc["categories"]] == ["3D", "web-design"]
        assert [c["displayName"] for c in doc["categories"]] == ["3D", "Web Design"]
        assert [c["projectCount"] for c in doc["categories"]] == [2, 2]

    def test_project_fields(self, builder, sample_portfolio):
        doc = builder.build(sample_portfolio).to_json_dict()
        robot = find_project(doc, "3D", "robot")

        assert set(robot) == {
            "id", "title", "description", "category", "path", "thumbnail",
            "images", "releaseVersion", "imageSource",
        }
        assert robot["path"] == "portfolio/3D/robot"
        assert robot["description"] == "Hard-surface model"
        assert robot["imageSource"] == "repo"
        assert robot["releaseVersion"] is None
        assert robot["thumbnail"] == "/site/portfolio/3D/robot/thumbnail.jpg"
        assert robot["images"][0] == {
            "name": "front.webp",
            "url": "/site/portfolio/3D/robot/images/front.webp",
            "source": "repo",
        }

    def test_projects_sorted_by_title(self, builder, sample_portfolio):
        doc = builder.build(sample_portfolio).to_json_dict()
        assert [p["title"] for p in doc["projects"]] == ["Castle", "Empty", "landing page", "Robot"]

    def test_title_sort_is_case_and_accent_insensitive(self):
        titles = ["zebra", "Éclair", "apple", "Banana", "eagle"]
        assert sorted(titles, key=title_sort_key) == ["apple", "Banana", "eagle", "Éclair", "zebra"]


class TestImageResolution:
    """이미지 목록 / 썸네일"""

    def test_webp_preferred_over_png(self, builder, portfolio_root):
        make_project(portfolio_root, "3D", "robot", images=["a.png", "a.webp"])
        doc = builder.build(portfolio_root).to_json_dict()
        project = find_project(doc, "3D", "robot")

        assert image_names(project) == ["a.webp"]
        assert project["images"][0]["url"].endswith("/images/a.webp")

    def test_no_images_folder(self, builder, portfolio_root):
        make_project(portfolio_root, "3D", "robot", {"title": "X"})
        project = find_project(builder.build(portfolio_root).to_json_dict(), "3D", "robot")

        assert project["thumbnail"] is None
        assert project["images"] == []

    def test_release_url_from_scan(self, builder, portfolio_root):
        make_project(portfolio_root, "3D", "robot", {"title": "X", "releaseVersion": "v1"}, images=["shot.png"])
        project = find_project(builder.build(portfolio_root).to_json_dict(), "3D", "robot")

        expected = f"{RELEASE_REPO}/releases/download/v1/3D_robot_shot.png"
        assert project["images"] == [{"name": "shot.png", "url": expected, "source": "release"}]
        assert project["imageSource"] == "release"
        assert project["releaseVersion"] == "v1"
        assert project["thumbnail"] == expected

    def test_release_explicit_images_keep_order(self, builder, sample_portfolio):
        doc = builder.build(sample_portfolio).to_json_dict()
        castle = find_project(doc, "3D", "castle")

        assert image_names(castle) == ["b.png", "a.png"]
        assert castle["thumbnail"] == f"{RELEASE_REPO}/releases/download/v20250101/3D_castle_b.png"

    def test_empty_project_in_sample(self, builder, sample_portfolio):
        doc = builder.build(sample_portfolio).to_json_dict()
        empty = find_project(doc, "web-design", "empty")
        landing = find_project(doc, "web-design", "landing")

        assert empty["images"] == [] and empty["thumbnail"] is None
        assert landing["thumbnail"] == landing["images"][0]["url"]


class TestErrorIsolation:
    """프로젝트 단위 실패는 skip, 나머지는 계속"""

    @pytest.mark.parametrize(
        "bad_metadata",
        ["{not json", "[1, 2, 3]", json.dumps({"title": "X", "images": "a.png"})],
    )
    def test_malformed_metadata_skipped(self, builder, portfolio_root, bad_metadata, caplog):
        make_project(portfolio_root, "3D", "good", {"title": "Good"})
        bad_dir = make_project(portfolio_root, "3D", "bad", bad_metadata)

        outcomes = builder.collect(portfolio_root)
        failed = [o for o in outcomes if not o.ok]
        assert [o.path for o in failed] == [bad_dir / "metadata.json"]

        doc = builder.build_from(outcomes).to_json_dict()
        assert [p["id"] for p in doc["projects"]] == ["good"]
        assert doc["categories"] == [{"name": "3D", "displayName": "3D", "projectCount": 1}]
        assert str(bad_dir / "metadata.json") in caplog.text

    def test_missing_title_falls_back_to_folder(self, builder, portfolio_root):
        make_project(portfolio_root, "3D", "robot-arm", {"description": "no title"})
        project = find_project(builder.build(portfolio_root).to_json_dict(), "3D", "robot-arm")
        assert project["title"] == "robot-arm"

    def test_missing_root_is_fatal(self, builder, tmp_path):
        with pytest.raises(ManifestRootError):
            builder.build(tmp_path / "nope")

    def test_ignores_deeper_or_shallower_metadata(self, builder, portfolio_root):
        (portfolio_root / "metadata.json").write_text("{}", encoding="utf-8")
        make_project(portfolio_root, "3D", "robot")
        nested = portfolio_root / "3D" / "robot" / "extra"
        nested.mkdir()
        (nested / "metadata.json").write_text("{}", encoding="utf-8")

        doc = builder.build(portfolio_root).to_json_dict()
        assert [p["id"] for p in doc["projects"]] == ["robot"]

    def test_ignores_hidden_folders(self, builder, portfolio_root):
        make_project(portfolio_root, ".cache", "x", {"title": "Cached"})
        make_project(portfolio_root, "3D", ".draft", {"title": "Draft"})
        make_project(portfolio_root, "3D", "robot")

        doc = builder.build(portfolio_root).to_json_dict()
        assert [p["id"] for p in doc["projects"]] == ["robot"]
        assert [c["name"] for c in doc["categories"]] == ["3D"]


class TestIdempotence:

    def test_rebuild_is_identical(self, build_options, sample_portfolio):
        first = ManifestBuilder(build_options).build(sample_portfolio).to_json_dict()
        second = ManifestBuilder(build_options).build(sample_portfolio).to_json_dict()

        assert first["categories"] == second["categories"]
        assert first["projects"] == second["projects"]

    def test_content_prefix_override(self, fixed_clock, sample_portfolio):
        from gallery.schemas.build_dto import ManifestBuildOptions

        builder = ManifestBuilder(ManifestBuildOptions(content_prefix=""), clock=fixed_clock)
        robot = find_project(builder.build(sample_portfolio).to_json_dict(), "3D", "robot")
        assert robot["path"] == "3D/robot"
        assert robot["thumbnail"] == "/3D/robot/thumbnail.jpg"


def test_utc_timestamp_format():
    ts = utc_timestamp()
    assert ts.endswith("Z") and "T" in ts
    assert len(ts) == len("2026-01-02T08:00:00.000Z")
