from __future__ import annotations

from repomirror.summary import generate_summary, split_strengths
from tests._fixtures.metadata_builder import FULL_README, MetadataBuilder
from tests._fixtures.scores import score_table


def _summary(builder: MetadataBuilder, metadata, table) -> str:
    overall = sum(dimension.score for dimension in table.values())
    maximum = sum(dimension.max_score for dimension in table.values())
    return generate_summary(metadata, table, overall, maximum, now=builder.now)


def test_split_strengths_uses_inclusive_and_exclusive_bounds() -> None:
    # 7/10 is exactly 70% (strength); 4/10 is exactly 40% (neither).
    table = score_table(real_world_relevance=7, code_quality=7)
    strengths, weaknesses = split_strengths(table)

    assert "Real-World Relevance" in strengths
    assert "Code Quality" not in strengths
    assert weaknesses == ["Code Quality"]

    neutral = score_table(real_world_relevance=4)
    assert "Real-World Relevance" not in split_strengths(neutral)[1]


def test_perfect_repository_summary(builder: MetadataBuilder) -> None:
    metadata = builder.metadata(readme=FULL_README, stars=150, forks=10, updated_at=builder.days_ago(1))

    summary = _summary(builder, metadata, score_table())

    assert summary.startswith("## Professional Repository Evaluation\n\n")
    assert "demonstrates **excellent** software engineering practices with a score of **100/100 (100.0%)**. " in summary
    assert (
        "The codebase excels in code quality, project structure, documentation, testing, "
        "real-world relevance, development practices, demonstrating professional quality in these areas. "
    ) in summary
    assert "notable gaps" not in summary
    assert "- **Documentation**: Comprehensive README provides clear project information\n" in summary
    assert "- **Community**: Gaining traction with 150 stars and 10 forks\n" in summary
    assert "- **Activity**: Actively maintained with recent updates\n" in summary
    assert summary.endswith("addressing any remaining gaps in minor areas.")


def test_single_strength_and_weakness_use_short_sentences(builder: MetadataBuilder) -> None:
    table = score_table(
        project_structure=7,
        documentation=5,
        testing=7,
        real_world_relevance=5,
        development_practices=7,
    )

    summary = _summary(builder, builder.metadata(readme="Short readme"), table)

    assert "has a **solid foundation** with a score of **51/100 (51.0%)**. " in summary
    assert "The codebase excels in code quality. " in summary
    assert "However, there are notable gaps in documentation. " in summary
    assert summary.endswith("focusing particularly on documentation.")


def test_high_scores_join_every_weakness(builder: MetadataBuilder) -> None:
    table = score_table(testing=2, real_world_relevance=3)

    summary = _summary(builder, builder.metadata(readme=FULL_README), table)

    assert "**excellent**" in summary
    assert "However, there are notable gaps in testing, real-world relevance that should be addressed. " in summary
    assert "- **Testing**: Lacks visible testing infrastructure - implement automated tests and CI/CD\n" in summary
    assert summary.endswith("remaining gaps in testing and real-world relevance.")


def test_mid_band_recommends_first_weakness(builder: MetadataBuilder) -> None:
    table = score_table(documentation=5, testing=5, real_world_relevance=10, development_practices=10)

    summary = _summary(builder, builder.metadata(readme=FULL_README), table)

    assert "shows **strong** development practices with a score of **65/100 (65.0%)**. " in summary
    assert summary.endswith("Prioritize enhancing documentation to meet professional standards.")


def test_missing_readme_and_inactivity_observations(builder: MetadataBuilder) -> None:
    metadata = builder.metadata(readme=None, updated_at=builder.days_ago(200))
    table = score_table(
        code_quality=0,
        project_structure=0,
        documentation=0,
        testing=2,
        real_world_relevance=0,
        development_practices=0,
    )

    summary = _summary(builder, metadata, table)

    assert "**significant room for improvement**" in summary
    assert "excels in" not in summary
    assert (
        "- **Documentation**: Missing README file is a critical issue that must be addressed immediately\n"
    ) in summary
    assert "- **Code Quality**" not in summary
    assert "- **Community**" not in summary
    assert "- **Activity**: Repository appears inactive (last updated 200 days ago)\n" in summary
    assert summary.endswith("focusing particularly on code quality.")


def test_comprehensive_readme_threshold_counts_utf16_units(builder: MetadataBuilder) -> None:
    metadata = builder.metadata(readme="✨🎉" * 334)

    summary = _summary(builder, metadata, score_table())

    assert len(metadata.readme) == 668
    assert "- **Documentation**: Comprehensive README provides clear project information\n" in summary
