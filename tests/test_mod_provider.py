import pytest

from modadd.exceptions import (
    CurseForgeAPIError,
    CurseForgeError,
    DoesNotExist,
    GitHubAPIError,
    GitHubError,
    InvalidIdentifier,
    ModrinthError,
    ModrinthInvalidIDError,
)
from modadd.models import ModIdentifier, Provider
from modadd.services import ModProvider, route_identifier
from modadd.services.mod_provider import parse_project_id


@pytest.mark.parametrize(
    "identifier,expected",
    [
        ("12345", (Provider.CURSEFORGE, 12345)),
        ("-7", (Provider.CURSEFORGE, -7)),
        ("+42", (Provider.CURSEFORGE, 42)),
        ("owner/repo", (Provider.GITHUB, ("owner", "repo"))),
        ("sodium", (Provider.MODRINTH, "sodium")),
        ("a/b/c", (Provider.MODRINTH, "a/b/c")),
        ("2147483648", (Provider.MODRINTH, "2147483648")),
        (" 12", (Provider.MODRINTH, " 12")),
    ],
)
def test_route_identifier(identifier, expected):
    assert route_identifier(identifier) == expected


def test_parse_project_id_bounds():
    assert parse_project_id("2147483647") == 2**31 - 1
    assert parse_project_id("-2147483648") == -(2**31)
    assert parse_project_id("-2147483649") is None
    assert parse_project_id("1_000") is None
    assert parse_project_id("") is None


@pytest.fixture
def mod_provider(modrinth_client, curseforge_client, github_client, checks, profile):
    return ModProvider(
        modrinth_client, curseforge_client, github_client, checks, profile
    )


@pytest.mark.asyncio
async def test_numeric_identifier_uses_curseforge(
    mod_provider, curseforge_client, github_client, modrinth_client, profile
):
    assert await mod_provider.add("12345") == "Just Enough Items"
    assert curseforge_client.calls == [12345]
    assert github_client.calls == []
    assert modrinth_client.calls == []
    assert profile.mods[0].identifier == ModIdentifier.curseforge(12345)


@pytest.mark.asyncio
async def test_slash_identifier_uses_github(
    mod_provider, curseforge_client, github_client, profile
):
    assert await mod_provider.add("owner/repo") == "repo"
    assert github_client.calls == [("owner", "repo")]
    assert curseforge_client.calls == []
    assert profile.mods[0].identifier == ModIdentifier.github("owner", "repo")


@pytest.mark.asyncio
async def test_other_identifier_uses_modrinth(mod_provider, modrinth_client, profile):
    assert await mod_provider.add("sodium") == "Sodium"
    assert modrinth_client.calls == ["sodium"]
    assert profile.mods[0].identifier == ModIdentifier.modrinth("AANobbMI")


@pytest.mark.asyncio
@pytest.mark.parametrize("identifier", ["/repo", "owner/"])
async def test_empty_github_segment_is_invalid(
    mod_provider, github_client, identifier
):
    with pytest.raises(InvalidIdentifier):
        await mod_provider.add(identifier)
    assert github_client.calls == []


@pytest.mark.asyncio
async def test_not_found_is_normalized_for_every_provider(mod_provider):
    with pytest.raises(DoesNotExist):
        await mod_provider.add("999")
    with pytest.raises(DoesNotExist):
        await mod_provider.add("someone/missing")
    with pytest.raises(DoesNotExist):
        await mod_provider.add("missing-mod")


@pytest.mark.asyncio
async def test_unrecognized_errors_are_wrapped(mod_provider, curseforge_client):
    source = CurseForgeAPIError("Forbidden", status=403)
    curseforge_client.error = source
    with pytest.raises(CurseForgeError) as exc_info:
        await mod_provider.add("12345")
    assert exc_info.value.source is source


@pytest.mark.asyncio
async def test_github_errors_are_wrapped(mod_provider, github_client):
    github_client.error = GitHubAPIError("API rate limit exceeded", status=403)
    with pytest.raises(GitHubError):
        await mod_provider.add("owner/repo")


@pytest.mark.asyncio
async def test_single_add_keeps_modrinth_invalid_id_wrapped(mod_provider):
    with pytest.raises(ModrinthError) as exc_info:
        await mod_provider.add("bad id with spaces")
    assert isinstance(exc_info.value.source, ModrinthInvalidIDError)
