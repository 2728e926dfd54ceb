from jira_context_adapter.core.domain.issue import (
    IssueReference,
    Mention,
    MentionSource,
    MentionType,
    NormalizedComment,
    NormalizedIssue,
)


def _mention(key: str, source: MentionSource = MentionSource.DESCRIPTION, comment_id: str | None = None) -> Mention:
    return Mention(key=key, type=MentionType.MENTION, source=source, comment_id=comment_id)


class TestWithComments:
    def test_appends_comment_mentions_after_existing_ones(self) -> None:
        issue = NormalizedIssue(id="1", key="A-1", related_issues=(_mention("DUP-1"),))
        comment = NormalizedComment(
            id="c-1",
            body="DUP-1 and B-2",
            mentions=(
                _mention("DUP-1", MentionSource.COMMENT, "c-1"),
                _mention("B-2", MentionSource.COMMENT, "c-1"),
            ),
        )

        enriched = issue.with_comments((comment,))

        assert [m.key for m in enriched.related_issues] == ["DUP-1", "DUP-1", "B-2"]
        assert enriched.comments == (comment,)
        assert issue.comments is None
        assert len(issue.related_issues) == 1

    def test_no_comments_gives_empty_tuple(self) -> None:
        enriched = NormalizedIssue(id="1", key="A-1").with_comments(())

        assert enriched.comments == ()
        assert enriched.related_issues == ()


class TestWithEpicSummary:
    def test_sets_summary_on_epic_link(self) -> None:
        issue = NormalizedIssue(id="1", key="A-1", epic_link=IssueReference(id="E-1", key="E-1"))

        enriched = issue.with_epic_summary("The epic")

        assert enriched.epic_link.summary == "The epic"
        assert issue.epic_link.summary is None

    def test_without_epic_link_is_unchanged(self) -> None:
        issue = NormalizedIssue(id="1", key="A-1")

        assert issue.with_epic_summary("ignored") is issue
