import copy
import pickle

import pytest

from iocbind import BindingNotFoundError, Container, Inject, Token


def test_tokens_with_same_description_are_distinct():
    a = Token("db")
    b = Token("db")

    assert a != b
    assert len({a: 1, b: 2}) == 2


def test_token_keeps_description_and_repr():
    token = Token("database")
    assert token.description == "database"
    assert repr(token) == "Token('database')"


def test_token_default_description():
    assert Token().description == ""


def test_token_is_immutable():
    token = Token("db")
    with pytest.raises(AttributeError):
        token.description = "other"
    with pytest.raises(AttributeError):
        token.extra = 1


def test_token_bindings_do_not_collide():
    c = Container()
    first = Token("config")
    second = Token("config")

    c.bind(first, lambda _: "first")
    c.bind(second, lambda _: "second")

    assert c.get(first) == "first"
    assert c.get(second) == "second"


def test_token_and_string_ids_mix():
    c = Container()
    settings = Token[dict]("settings")

    c.bind(settings, lambda _: {"url": "sqlite://"})
    c.bind("db", lambda inject: ("db", inject(settings)["url"]))

    assert c.get("db") == ("db", "sqlite://")


def test_string_with_token_description_is_a_different_id():
    c = Container()
    c.bind(Token("db"), lambda _: "token")

    assert not c.is_bound("db")
    with pytest.raises(BindingNotFoundError):
        c.get("db")


def test_missing_token_is_carried_by_error():
    token = Token("missing")
    with pytest.raises(BindingNotFoundError) as ctx:
        Container().get(token)

    assert ctx.value.id is token
    assert str(ctx.value) == "Binding not found for id: Token('missing')"


def test_token_resolves_through_parent():
    token = Token("logger")
    parent = Container().bind(token, lambda _: "parent-logger")
    child = parent.create_child()

    assert child.get(token) == "parent-logger"


def test_copy_returns_same_token():
    token = Token("db")
    assert copy.copy(token) is token
    assert copy.deepcopy(token) is token


def test_deepcopy_keeps_token_keys():
    token = Token("db")
    config = {token: {"url": "sqlite://"}}

    copied = copy.deepcopy(config)

    assert next(iter(copied)) is token
    assert copied[token] == {"url": "sqlite://"}
    assert copied[token] is not config[token]


def test_copied_token_still_resolves():
    token = Token("db")
    c = Container().bind(token, lambda _: "db")
    assert c.get(copy.deepcopy(token)) == "db"


def test_token_cannot_be_pickled():
    with pytest.raises(TypeError, match="cannot be pickled"):
        pickle.dumps(Token("db"))


def test_typed_factory_injects_by_token():
    url: Token[str] = Token("url")

    def make_db(inject: Inject) -> tuple[str, str]:
        return ("db", inject(url))

    c = Container().bind(url, lambda _: "sqlite://").bind("db", make_db)
    assert c.get("db") == ("db", "sqlite://")
