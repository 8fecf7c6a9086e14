"""Tests for message catalogs and language notification."""

import string

from openlrae.i18n import Language, LanguageListener, LanguageNotifier, Messages, catalog_en, catalog_es


def _fields(template):
    return {name for _, name, _, _ in string.Formatter().parse(template) if name}


class RecordingListener(LanguageListener):
    def __init__(self):
        self.seen = []

    def on_language_change(self, language):
        self.seen.append(language)


class TestCatalogs:
    """Catalogs must stay in step with each other."""

    def test_same_keys(self):
        assert set(catalog_en.MESSAGES) == set(catalog_es.MESSAGES)

    def test_same_placeholders(self):
        for key, template in catalog_en.MESSAGES.items():
            assert _fields(template) == _fields(catalog_es.MESSAGES[key]), key

    def test_messages_format(self):
        messages = Messages(Language.SPANISH)
        text = messages.get("report.scores", value=0.5, exposure=0.5, impact=1.0)
        assert text.startswith("Riesgo = 0.5")

    def test_missing_translation_falls_back_to_english(self, monkeypatch):
        monkeypatch.delitem(catalog_es.MESSAGES, "report.tips")
        assert Messages(Language.SPANISH).get("report.tips") == catalog_en.MESSAGES["report.tips"]


class TestLanguage:
    """Tests for Language.from_locale."""

    def test_locale_tags(self):
        assert Language.from_locale("es") == Language.SPANISH
        assert Language.from_locale("es_ES") == Language.SPANISH
        assert Language.from_locale("es-ES.UTF-8") == Language.SPANISH
        assert Language.from_locale("en_GB") == Language.ENGLISH

    def test_unknown_locale_falls_back_to_default(self):
        assert Language.from_locale("fr_FR") == Language.ENGLISH
        assert Language.from_locale("") == Language.ENGLISH
        assert Language.from_locale(None) == Language.ENGLISH


class TestLanguageNotifier:
    """Tests for LanguageNotifier."""

    def setup_method(self):
        self.notifier = LanguageNotifier(Language.ENGLISH)
        self.listener = RecordingListener()

    def test_subscribe_sends_current_language(self):
        self.notifier.subscribe(self.listener)
        assert self.listener.seen == [Language.ENGLISH]

    def test_set_language_notifies_every_listener(self):
        other = RecordingListener()
        self.notifier.subscribe(self.listener)
        self.notifier.subscribe(other)
        self.notifier.set_language(Language.SPANISH)
        assert self.listener.seen[-1] == Language.SPANISH
        assert other.seen[-1] == Language.SPANISH

    def test_set_language_from_locale_string(self):
        self.notifier.subscribe(self.listener)
        self.notifier.set_language("es_AR")
        assert self.notifier.language == Language.SPANISH

    def test_set_default_language(self):
        self.notifier.set_language(Language.SPANISH)
        self.notifier.subscribe(self.listener)
        self.notifier.set_default_language()
        assert self.listener.seen == [Language.SPANISH, Language.ENGLISH]
