from tagcloud.counter import compute_word_frequencies
from tagcloud.tokenizer import tokenize


def test_counts_words():
    assert compute_word_frequencies(tokenize("Hello, World! Hello.")) == {"hello": 2, "world": 1}


def test_empty_tokens():
    assert compute_word_frequencies([]) == {}


def test_total_equals_token_count():
    text = "the cat sat on the mat. THE CAT ran. It's 4 o'clock -- isn't it?"
    tokens = list(tokenize(text))
    frequencies = compute_word_frequencies(tokens)
    assert sum(frequencies.values()) == len(tokens)
    assert all(count >= 1 for count in frequencies.values())


def test_input_not_mutated():
    tokens = ["a", "b", "a"]
    compute_word_frequencies(tokens)
    assert tokens == ["a", "b", "a"]


def test_returns_plain_dict_from_a_generator():
    frequencies = compute_word_frequencies(t for t in ["x", "y", "x"])
    assert type(frequencies) is dict
    assert frequencies == {"x": 2, "y": 1}
