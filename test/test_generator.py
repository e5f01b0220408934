"""
Statement generator tests
"""

import random

import pytest
from generator import generate_expression, generate_statement, write_statements
from options import Options
from parsing import parse
from syntax_tree import tree_depth
from tokenizer import tokenize


class TestGenerator:

    @pytest.fixture
    def rng(self):
        return random.Random(1234)

    def test_depth_zero_is_a_literal(self, rng):
        for _ in range(100):
            text = generate_expression(0, rng, max_literal=10)
            assert text.isdigit()
            assert 0 <= int(text) < 10

    @pytest.mark.parametrize("depth", [0, 1, 2, 4])
    def test_statements_parse_with_exact_depth(self, rng, depth):
        for _ in range(25):
            text = generate_statement(depth, rng)
            assert text.startswith("(simplify ")
            assert tree_depth(parse(tokenize(text))) == depth + 2

    def test_about_a_quarter_are_negations(self, rng):
        unary = sum(1 for _ in range(2000) if len(tokenize(generate_expression(1, rng))) == 4)
        assert 0.2 < unary / 2000 < 0.3

    def test_seed_is_reproducible(self):
        first = [generate_statement(2, random.Random(5)) for _ in range(3)]
        second = [generate_statement(2, random.Random(5)) for _ in range(3)]
        assert first == second

    def test_write_statements(self, tmp_path):
        path = tmp_path / "statements.txt"
        write_statements(str(path), 30, max_depth=2, seed=9)
        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 30
        for line in lines:
            parse(tokenize(line))

    def test_write_statements_with_keyword(self, tmp_path):
        path = tmp_path / "statements.txt"
        write_statements(str(path), 10, seed=2, keyword="reduce")
        for line in path.read_text(encoding="utf-8").splitlines():
            assert parse(tokenize(line), Options(keyword="reduce")).child is not None
