"""Tests for event vocabulary extraction."""

from journalcorr.analysis.vocabulary import extract_vocabulary


class TestExtractVocabulary:
    """Test extract_vocabulary ordering and uniqueness."""

    def test_reference_vocabulary(self, reference_journal, reference_vocabulary):
        assert extract_vocabulary(reference_journal) == reference_vocabulary

    def test_no_duplicates(self, reference_journal):
        vocabulary = extract_vocabulary(reference_journal)
        assert len(vocabulary) == len(set(vocabulary))

    def test_exactly_the_union_of_events(self, reference_journal):
        union = set()
        for entry in reference_journal:
            union.update(entry.events)
        assert set(extract_vocabulary(reference_journal)) == union

    def test_first_appearance_order(self, make_journal):
        """Entry order first, then tag order within an entry; no sorting."""
        journal = make_journal([
            (["zebra", "apple"], False),
            (["apple", "mango", "zebra"], True),
            (["banana"], False),
        ])
        assert extract_vocabulary(journal) == ["zebra", "apple", "mango", "banana"]

    def test_empty_journal(self, make_journal):
        assert extract_vocabulary([]) == []
        assert extract_vocabulary(make_journal([([], True)])) == []

    def test_deterministic(self, reference_journal):
        assert extract_vocabulary(reference_journal) == extract_vocabulary(reference_journal)
