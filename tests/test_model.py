"""Tests for representations.database.model against an in-memory SQLite database."""

import asyncio
import json

from tortoise import Tortoise

from representations import Representation, models_to_array
from tests.orm_models import Author, Book, Passport, Person


def run_with_db(scenario):
    """Run an async scenario with a fresh in-memory database."""

    async def runner():
        await Tortoise.init(
            db_url="sqlite://:memory:",
            modules={"models": ["tests.orm_models"]},
        )
        await Tortoise.generate_schemas()
        try:
            return await scenario()
        finally:
            await Tortoise.close_connections()

    return asyncio.run(runner())


async def create_author_with_book():
    author = await Author.create(name="Ada", password_hash="secret-hash")
    book = await Book.create(title="Notes", pages="42", author=author)
    return author.id, book.id


class TestToDict:
    def test_hidden_casts_and_dates(self):
        async def scenario():
            author_id, book_id = await create_author_with_book()
            author = await Author.get(id=author_id)
            book = await Book.get(id=book_id)
            return author.to_dict(), book.to_dict(), author.to_dict(include_hidden=True)

        author, book, author_with_hidden = run_with_db(scenario)

        assert set(author) == {"id", "name", "created_at"}
        assert isinstance(author["created_at"], str)
        assert author_with_hidden["password_hash"] == "secret-hash"
        assert book["pages"] == 42
        assert book["author_id"] == author["id"]
        assert "author" not in book

    def test_to_json_respects_hidden(self):
        async def scenario():
            author_id, _ = await create_author_with_book()
            return (await Author.get(id=author_id)).to_json()

        data = json.loads(run_with_db(scenario))
        assert data["name"] == "Ada"
        assert "password_hash" not in data


class TestModelsToArray:
    def test_unfetched_relations_are_skipped(self):
        async def scenario():
            _, book_id = await create_author_with_book()
            return models_to_array(await Book.get(id=book_id))

        result = run_with_db(scenario)
        assert result["title"] == "Notes"
        assert "author" not in result

    def test_fetched_foreign_key(self):
        async def scenario():
            _, book_id = await create_author_with_book()
            book = await Book.get(id=book_id)
            await book.fetch_related("author")
            return models_to_array(book)

        result = run_with_db(scenario)
        assert result["author"]["name"] == "Ada"
        assert "password_hash" not in result["author"]

    def test_fetched_reverse_relation(self):
        async def scenario():
            author_id, _ = await create_author_with_book()
            author = await Author.get(id=author_id)
            await author.fetch_related("books")
            return models_to_array([author])

        result = run_with_db(scenario)
        assert len(result) == 1
        assert result[0]["name"] == "Ada"
        assert [book["title"] for book in result[0]["books"]] == ["Notes"]
        assert result[0]["books"][0]["pages"] == 42

    def test_fetched_backward_one_to_one(self):
        async def scenario():
            person = await Person.create(name="Ada")
            await Passport.create(number="NL-1815", person=person)
            unfetched = models_to_array(await Person.get(id=person.id))
            await person.fetch_related("passport")
            return unfetched, models_to_array(person)

        unfetched, result = run_with_db(scenario)
        assert "passport" not in unfetched
        assert result["name"] == "Ada"
        assert result["passport"]["number"] == "NL-1815"

    def test_representation_output_with_models(self, write_representation):
        write_representation("books/index", """
            {'count': len(books), 'books': books}
        """)

        async def scenario():
            await create_author_with_book()
            books = await Book.all()
            output = Representation.forge("books/index", {"books": books}).output()
            return models_to_array(output)

        result = run_with_db(scenario)
        assert result["count"] == 1
        # The mapping itself is left alone, models inside it are not converted
        assert isinstance(result["books"][0], Book)

    def test_representation_file_converts_nested_models(self, write_representation):
        write_representation("books/index", """
            from representations import models_to_array

            {'count': len(books), 'books': models_to_array(books)}
        """)

        async def scenario():
            await create_author_with_book()
            books = await Book.all()
            return Representation.forge("books/index", {"books": books}).output()

        result = run_with_db(scenario)
        assert result["books"][0]["title"] == "Notes"
        assert json.loads(json.dumps(result))["count"] == 1
