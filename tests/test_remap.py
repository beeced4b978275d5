"""
Tests for identity remapping.
"""

from forker import (
    NO_PARENT,
    clone_messages,
    get_all_messages_up_to_parent,
    get_messages_up_to_target_level,
)


class TestCloneMessages:
    """Test clone_messages."""

    def test_rewrites_ids_and_parents(self, nested_messages, sequential_ids):
        selected = get_all_messages_up_to_parent(nested_messages, "18")

        cloned = clone_messages(selected, "convo-2", "user1", id_factory=sequential_ids)

        # 11, 13, 15, 16, 21, 18
        assert [m.messageId for m in cloned] == [f"new-{i}" for i in range(1, 7)]
        assert [m.parentMessageId for m in cloned] == [
            NO_PARENT, "new-1", "new-2", "new-2", "new-2", "new-4",
        ]

    def test_sets_conversation_and_user(self, fork_messages):
        cloned = clone_messages(fork_messages, "convo-2", "user1")

        assert all(m.conversationId == "convo-2" for m in cloned)
        assert all(m.user == "user1" for m in cloned)

    def test_payload_copied(self, fork_messages):
        cloned = clone_messages(fork_messages, "convo-2", "user1")

        assert [m.text for m in cloned] == [m.text for m in fork_messages]
        assert cloned[0].createdAt == "2021-01-01"

    def test_unique_ids_and_cardinality(self, complex_messages):
        selected = get_messages_up_to_target_level(complex_messages, "10")

        cloned = clone_messages(selected, "convo-2", "user1")

        assert len(cloned) == len(selected)
        assert len({m.messageId for m in cloned}) == len(cloned)
        assert not {m.messageId for m in cloned} & {m.messageId for m in selected}

    def test_unselected_parent_becomes_root(self, complex_messages):
        selected = [m for m in complex_messages if m.messageId in ("3", "10")]

        cloned = clone_messages(selected, "convo-2", "user1")

        assert cloned[0].parentMessageId == NO_PARENT
        assert cloned[1].parentMessageId == cloned[0].messageId

    def test_child_before_parent_is_rooted(self, complex_messages):
        selected = [m for m in complex_messages if m.messageId in ("10", "3")][::-1]
        assert [m.messageId for m in selected] == ["10", "3"]

        cloned = clone_messages(selected, "convo-2", "user1")

        assert all(m.parentMessageId == NO_PARENT for m in cloned)

    def test_tree_property_preserved(self, complex_messages):
        selected = get_messages_up_to_target_level(complex_messages, "3")

        cloned = clone_messages(selected, "convo-2", "user1")
        new_ids = {m.messageId for m in cloned}

        for message in cloned:
            assert message.parentMessageId == NO_PARENT or message.parentMessageId in new_ids

    def test_originals_untouched(self, fork_messages):
        before = [m.model_dump() for m in fork_messages]

        clone_messages(fork_messages, "convo-2", "user1")

        assert [m.model_dump() for m in fork_messages] == before

    def test_empty_selection(self):
        assert clone_messages([], "convo-2", "user1") == []
