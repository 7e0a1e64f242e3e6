"""Tests for relevance scoring."""

from cheatfinder.matching import is_popular_command, relevance_score


class TestRelevanceScore:
    def test_exact_beats_prefix_beats_substring(self) -> None:
        exact = relevance_score("git", "git", "")
        prefix = relevance_score("git", "git status", "")
        substring = relevance_score("git", "legit", "")
        assert exact > prefix > substring

    def test_exact_match_value(self) -> None:
        # 50 base + 100 exact + 2 * 6 word bonus
        assert relevance_score("git", "git", "") == 162

    def test_case_insensitive(self) -> None:
        assert relevance_score("GIT", "git", "") == relevance_score("git", "GIT", "")

    def test_description_match_adds_bonus(self) -> None:
        without = relevance_score("tar", "tar -xzf archive.tgz", "")
        with_desc = relevance_score("tar", "tar -xzf archive.tgz", "Extract a tar archive")
        # +25 for the term, +2 for the word
        assert with_desc - without == 27

    def test_delimited_word_beats_embedded_word(self) -> None:
        delimited = relevance_score("rm", "docker image-rm", "")
        embedded = relevance_score("rm", "dockerrmx", "")
        assert delimited > embedded

    def test_multi_word_bonus(self) -> None:
        # 50 + 80 prefix + 12 (git) + 4 (rm) + 20 multi-word + 15 popular
        assert relevance_score("git rm", "git rm file.txt", "") == 181

    def test_long_command_penalty(self) -> None:
        assert relevance_score("zzz", "a" * 100, "") == 50
        assert relevance_score("zzz", "a" * 101, "") == 40

    def test_popular_command_boost(self) -> None:
        assert relevance_score("zzz", "docker ps -a", "") == 65

    def test_never_below_one(self) -> None:
        assert relevance_score("zzz", "a" * 500, "") >= 1
        assert relevance_score("zzz", None, None) >= 1

    def test_short_words_ignored_for_word_bonus(self) -> None:
        assert relevance_score("a", "zzz", "") == 50


class TestIsPopularCommand:
    def test_known_prefixes(self) -> None:
        assert is_popular_command("git commit -m 'x'")
        assert is_popular_command("KUBECTL GET pods")
        assert is_popular_command("grep -r foo .")

    def test_unknown_command(self) -> None:
        assert not is_popular_command("terraform apply")
