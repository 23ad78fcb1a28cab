"""Tests for the ChatSession entity."""

from __future__ import annotations

import pytest

from persona_chat.l1_entities.chat_message import ChatMessage
from persona_chat.l1_entities.session import ChatSession
from persona_chat.l1_entities.settings import CharacterProfile


class TestReplaceCharacter:
    def test_clears_history_and_bumps_epoch(self):
        session = ChatSession()
        session.append_turn('hi', 'hello')
        session.replace_character(CharacterProfile(name='Ann', prompt='You are Ann'))

        assert session.history == []
        assert session.character.name == 'Ann'
        assert session.character_epoch == 1

    def test_epoch_changes_even_for_identical_character(self):
        session = ChatSession()
        profile = CharacterProfile(name='Ann', prompt='p')
        session.replace_character(profile)
        session.replace_character(profile)
        assert session.character_epoch == 2


class TestModels:
    def test_replace_selects_first(self):
        session = ChatSession()
        session.replace_models(['a', 'b'])
        assert session.models == ['a', 'b']
        assert session.selected_model == 'a'

    def test_replace_is_not_a_merge(self):
        session = ChatSession()
        session.replace_models(['a', 'b'])
        session.select_model('b')
        session.replace_models(['c'])
        assert session.models == ['c']
        assert session.selected_model == 'c'

    def test_replace_with_empty_clears_selection(self):
        session = ChatSession()
        session.replace_models(['a'])
        session.replace_models([])
        assert session.selected_model is None

    def test_select_unknown_model_raises(self):
        session = ChatSession()
        session.replace_models(['a'])
        with pytest.raises(ValueError, match='Unknown model'):
            session.select_model('zzz')

    def test_select_none_allowed(self):
        session = ChatSession()
        session.replace_models(['a'])
        session.select_model(None)
        assert session.selected_model is None


class TestAppendTurn:
    def test_appends_user_then_assistant(self):
        session = ChatSession()
        session.append_turn('hi', 'hello')
        session.append_turn('how are you', 'fine')
        assert session.history == [
            ChatMessage(sender='user', text='hi'),
            ChatMessage(sender='assistant', text='hello'),
            ChatMessage(sender='user', text='how are you'),
            ChatMessage(sender='assistant', text='fine'),
        ]
