"""Shared pytest fixtures for docsym tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from docsym.extractors.outline import extract_symbols
from docsym.models.symbols import Symbol
from docsym.parsing.ruby import RubySyntaxTreeProvider


@pytest.fixture
def provider() -> RubySyntaxTreeProvider:
    """Provide a Ruby syntax-tree provider."""
    return RubySyntaxTreeProvider()


@pytest.fixture
def outline(provider: RubySyntaxTreeProvider) -> Callable[[str], list[Symbol]]:
    """Factory fixture: Ruby source -> top-level outline symbols."""

    def _outline(source: str) -> list[Symbol]:
        return extract_symbols(provider.parse(source).root)

    return _outline


@pytest.fixture
def write_rb_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture to write Ruby files."""

    def _write(content: str, name: str = "fake.rb") -> Path:
        file_path = tmp_path / name
        file_path.write_text(content)
        return file_path

    return _write


@pytest.fixture
def sample_rails_code() -> str:
    """Rails model, controller and test case in one file."""
    return '''
module Shop
  class Order < ApplicationRecord
    attr_reader :total

    before_save :normalize, :stamp
    after_commit -> { notify }

    def normalize
    end

    def self.recent
    end
  end

  class OrdersController < ApplicationController
    before_action do
      authenticate!
    end
  end

  class OrderTest < ActiveSupport::TestCase
    test "computes the total" do
      assert true
    end

    it "uses the it alias" do
    end
  end
end
'''
