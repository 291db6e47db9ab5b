"""인덱스 생성기 테스트."""

from pathlib import Path

import pytest

from index_builder.builder import IndexGenerator, TemplateLoader, render_template, write_index
from index_builder.models import RepositoryMetadata, Theme
from index_builder.quality import QualityValidator


@pytest.fixture
def generator() -> IndexGenerator:
    """기본 설정의 IndexGenerator를 반환한다."""
    return IndexGenerator()


class TestRenderTemplate:
    """render_template 테스트."""

    def test_strings_inserted_verbatim(self) -> None:
        """문자열은 그대로, 그 외 값은 JSON으로 치환된다."""
        html = render_template(
            "<h1>{{title}}</h1><script>{{items}}</script>{{title}}",
            {"title": "<b>Hi</b>", "items": [1, "a"]},
        )
        assert html == '<h1><b>Hi</b></h1><script>[1, "a"]</script><b>Hi</b>'

    def test_unknown_tokens_left_untouched(self) -> None:
        """데이터에 없는 토큰은 남는다."""
        assert render_template("{{missing}}", {"other": "x"}) == "{{missing}}"

    def test_inserted_values_not_expanded_again(self) -> None:
        """삽입된 값 안의 토큰은 다시 치환되지 않는다."""
        html = render_template(
            "<meta content=\"{{title}}\">{{footer}}",
            {"title": "{{footer}}", "footer": "<p>f</p>"},
        )
        assert html == '<meta content="{{footer}}"><p>f</p>'


class TestTemplateLoader:
    """TemplateLoader 테스트."""

    def test_packaged_theme_template(self) -> None:
        """테마 전용 템플릿이 있으면 그것을 읽는다."""
        template = TemplateLoader().load(Theme.terminal)
        assert "Fira Code" in template

    def test_fallback_to_base(self) -> None:
        """테마 전용 템플릿이 없으면 기본 템플릿을 쓴다."""
        template = TemplateLoader().load(Theme.mario)
        assert "{{navigation}}" in template
        assert "Fira Code" not in template

    def test_custom_directory(self, tmp_path: Path) -> None:
        """지정한 디렉토리에서 템플릿을 읽는다."""
        (tmp_path / "base-index.html").write_text("base {{title}}", encoding="utf-8")
        (tmp_path / "mario-index.html").write_text("mario {{title}}", encoding="utf-8")
        loader = TemplateLoader(directory=tmp_path)
        assert loader.load(Theme.mario) == "mario {{title}}"
        assert loader.load(Theme.pricing) == "base {{title}}"

    def test_missing_base_raises(self, tmp_path: Path) -> None:
        """기본 템플릿도 없으면 FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            TemplateLoader(directory=tmp_path).load(Theme.default)


class TestIndexGenerator:
    """IndexGenerator 테스트."""

    def test_generated_page_passes_quality(self, generator: IndexGenerator) -> None:
        """생성된 페이지는 품질 검증을 통과한다."""
        metadata = RepositoryMetadata(
            name="mario-kart-game", description="A fun racing game"
        )
        item = generator.generate_index(metadata)
        assert item.theme == Theme.mario
        assert item.verdict.passed is True, item.verdict.model_dump_json(indent=2)
        assert item.verdict.score == 100
        assert "<title>mario-kart-game | Mario Theme</title>" in item.html
        assert "{{" not in item.html

    def test_terminal_template_used(self, generator: IndexGenerator) -> None:
        """terminal 테마는 전용 템플릿으로 렌더링된다."""
        item = generator.generate_index(
            RepositoryMetadata(name="shell-tools", description="Command helpers")
        )
        assert item.theme == Theme.terminal
        assert "Fira Code" in item.html
        assert item.verdict.passed is True

    def test_metadata_is_escaped(self, generator: IndexGenerator) -> None:
        """메타데이터는 HTML 이스케이프된다."""
        html = generator.render(
            RepositoryMetadata(name="<script>x</script>", description='say "hi"'),
            Theme.default,
        )
        assert "&lt;script&gt;x&lt;/script&gt;" in html
        assert 'content="say &quot;hi&quot;"' in html

    def test_placeholder_description_fails(self, generator: IndexGenerator) -> None:
        """설명에 플레이스홀더가 있으면 판정이 실패하고 보너스가 없다."""
        item = generator.generate_index(
            RepositoryMetadata(name="repo", description="Placeholder coming soon")
        )
        assert item.verdict.passed is False
        assert item.verdict.results.no_junky_text.passed is False
        assert "real_description" in item.verdict.results.has_required_elements.missing
        assert item.award.amount == 10

    def test_award_tokens(self, generator: IndexGenerator) -> None:
        """품질 통과 시 보너스가 더해진다."""
        verdict = QualityValidator().validate("").model_copy(update={"passed": True})
        award = generator.award_tokens(verdict)
        assert award.amount == 15
        assert award.currency == "ALC"

    def test_write_index(self, generator: IndexGenerator, tmp_path: Path) -> None:
        """생성된 페이지는 저장소별 디렉토리에 저장된다."""
        item = generator.generate_index(RepositoryMetadata(name="circuit-sim"))
        path = write_index(item, tmp_path)
        assert path == tmp_path / "circuit-sim" / "index.html"
        assert path.read_text(encoding="utf-8") == item.html

    def test_description_with_token_stays_in_head(self, generator: IndexGenerator) -> None:
        """설명에 템플릿 토큰이 있어도 다른 조각이 메타 태그에 들어가지 않는다."""
        html = generator.render(
            RepositoryMetadata(name="r", description="{{footer}}"), Theme.default
        )
        head = html.split("</head>")[0]
        assert "Index Authority" not in head
        assert "<p>" not in head
        assert 'content="{{footer}}"' in head

    @pytest.mark.parametrize("name", ["../escape", "owner/repo", "a\\b", "..", ""])
    def test_write_index_rejects_unsafe_names(
        self, generator: IndexGenerator, tmp_path: Path, name: str
    ) -> None:
        """경로 구분자나 상위 디렉토리를 포함한 이름은 거부한다."""
        item = generator.generate_index(RepositoryMetadata(name="circuit-sim"))
        item = item.model_copy(
            update={"repository": RepositoryMetadata(name=name)}
        )
        with pytest.raises(ValueError, match="Unsafe repository name"):
            write_index(item, tmp_path / "site")
        assert not (tmp_path / "site").exists()
