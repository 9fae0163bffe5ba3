"""Unit tests for the INSERT builder."""

import io

import pytest

from sqlclause import BuilderConfig, Insert, InsertClause, Select, SelectClause, insert
from sqlclause.exceptions import DialectNotSupportedError, SQLBuilderError


class TestInsertClauses:
    """Test INSERT clause methods on the default dialect."""

    def test_empty_insert(self) -> None:
        """Test a new builder renders an empty string."""
        assert Insert().as_string() == ""
        assert Insert().render_multi_line() == ""

    def test_insert_into(self) -> None:
        """Test the INSERT INTO clause."""
        assert Insert().insert_into("users").as_string() == "INSERT INTO users"

    def test_insert_into_overrides(self) -> None:
        """Test consecutive insert_into calls keep the last target."""
        query = Insert().insert_into("users").insert_into("orders").as_string()

        assert query == "INSERT INTO orders"

    def test_values_accumulate(self) -> None:
        """Test rows accumulate comma separated."""
        query = Insert().values("('foo', 'Foo')").values("('bar', 'Bar')").as_string()

        assert query == "VALUES ('foo', 'Foo'), ('bar', 'Bar')"

    def test_values_dedup(self) -> None:
        """Test repeating a row has no effect."""
        query = Insert().values("('foo', 'Foo')").values("('bar', 'Bar')").values("('foo', 'Foo')").as_string()

        assert query == "VALUES ('foo', 'Foo'), ('bar', 'Bar')"

    def test_empty_value_ignored(self) -> None:
        """Test an empty row is ignored."""
        assert Insert().insert_into("t").values("  ").as_string() == "INSERT INTO t"

    def test_values_after_insert_into(self) -> None:
        """Test VALUES renders after INSERT INTO regardless of call order."""
        query = Insert().values("('bar', 'Bar')").insert_into("users (login, name)").as_string()

        assert query == "INSERT INTO users (login, name) VALUES ('bar', 'Bar')"

    def test_overriding(self) -> None:
        """Test the OVERRIDING clause renders between target and values."""
        query = Insert().values("(1, 'foo')").overriding("SYSTEM VALUE").insert_into("users (id, login)").as_string()

        assert query == "INSERT INTO users (id, login) OVERRIDING SYSTEM VALUE VALUES (1, 'foo')"

    def test_on_conflict_overrides(self) -> None:
        """Test ON CONFLICT keeps the last value."""
        query = (
            Insert()
            .insert_into("users (login)")
            .values("('foo')")
            .on_conflict("DO UPDATE SET login = 'bar'")
            .on_conflict("DO NOTHING")
            .as_string()
        )

        assert query == "INSERT INTO users (login) VALUES ('foo') ON CONFLICT DO NOTHING"

    def test_select(self) -> None:
        """Test INSERT ... SELECT."""
        query = (
            Insert()
            .insert_into("users (login, name)")
            .select(Select().select("login, name").from_("users_bk").where_clause("active = true"))
            .as_string()
        )

        assert query == "INSERT INTO users (login, name) SELECT login, name FROM users_bk WHERE active = true"

    def test_select_last_wins(self) -> None:
        """Test attaching another SELECT replaces the previous one."""
        query = Insert().insert_into("t").select(Select().select("1")).select(Select().select("2")).as_string()

        assert query == "INSERT INTO t SELECT 2"

    def test_select_requires_select_builder(self) -> None:
        """Test only SELECT builders can be attached."""
        with pytest.raises(SQLBuilderError, match="select\\(\\) expects a Select builder"):
            Insert().select("SELECT 1")  # type: ignore[arg-type]


class TestInsertRawInjection:
    """Test raw SQL around INSERT clauses."""

    def test_raw(self) -> None:
        """Test raw SQL is placed before everything."""
        query = Insert().raw("insert into users (login, name)").values("('foo', 'Foo')").as_string()

        assert query == "insert into users (login, name) VALUES ('foo', 'Foo')"

    def test_raw_before_insert_into(self) -> None:
        """Test raw SQL before INSERT INTO."""
        query = (
            Insert().insert_into("users").raw_before(InsertClause.INSERT_INTO, "/* insert into users */").as_string()
        )

        assert query == "/* insert into users */ INSERT INTO users"

    def test_raw_after_insert_into(self) -> None:
        """Test raw SQL after INSERT INTO."""
        query = Insert().insert_into("users").raw_after(InsertClause.INSERT_INTO, "(name) values ('foo')").as_string()

        assert query == "INSERT INTO users (name) values ('foo')"

    def test_raw_before_values(self) -> None:
        """Test raw SQL before VALUES stands in for the target."""
        query = (
            Insert()
            .raw_before(InsertClause.VALUES, "insert into users (login, name)")
            .values("('foo', 'Foo')")
            .as_string()
        )

        assert query == "insert into users (login, name) VALUES ('foo', 'Foo')"

    def test_raw_after_values(self) -> None:
        """Test raw SQL after VALUES is joined with a single space."""
        query = Insert().values("('baz', 'Baz')").raw_after(InsertClause.VALUES, ", ('foo', 'Foo')").as_string()

        assert query == "VALUES ('baz', 'Baz') , ('foo', 'Foo')"

    def test_raw_before_empty_clause(self) -> None:
        """Test injections render even when their clause is empty."""
        query = Insert().insert_into("users").raw_before(InsertClause.RETURNING, "/* nothing returned */").as_string()

        assert query == "INSERT INTO users /* nothing returned */"

    def test_raw_rejects_foreign_clause(self) -> None:
        """Test injection against another statement kind's clause is rejected."""
        with pytest.raises(SQLBuilderError, match="InsertClause"):
            Insert().raw_before(SelectClause.FROM, "x")  # type: ignore[arg-type]


class TestInsertDialects:
    """Test dialect-gated INSERT clauses."""

    def test_returning_postgres(self) -> None:
        """Test RETURNING accumulates on PostgreSQL."""
        query = Insert(dialect="postgres").insert_into("users").returning("id").returning("login").as_string()

        assert query == "INSERT INTO users RETURNING id, login"

    def test_returning_rejected_on_mysql(self) -> None:
        """Test MySQL has no RETURNING."""
        with pytest.raises(DialectNotSupportedError, match="returning"):
            Insert(dialect="mysql").returning("id")

    def test_default_values(self) -> None:
        """Test DEFAULT VALUES on SQLite."""
        query = Insert(dialect="sqlite").insert_into("users").default_values().as_string()

        assert query == "INSERT INTO users DEFAULT VALUES"

    def test_default_values_rejected_on_standard(self) -> None:
        """Test the default dialect has no DEFAULT VALUES."""
        with pytest.raises(DialectNotSupportedError):
            Insert().default_values()

    def test_insert_or_and_replace_into_share_the_target(self) -> None:
        """Test SQLite conflict variants overwrite the INSERT INTO slot."""
        statement = Insert(dialect="sqlite").values("('foo')")

        statement.insert_or("ABORT INTO users (login)")
        assert statement.as_string() == "INSERT OR ABORT INTO users (login) VALUES ('foo')"

        statement.replace_into("users (login)")
        assert statement.as_string() == "REPLACE INTO users (login) VALUES ('foo')"

        statement.insert_into("users (login)")
        assert statement.as_string() == "INSERT INTO users (login) VALUES ('foo')"

    def test_insert_or_rejected_on_postgres(self) -> None:
        """Test conflict variants are SQLite only."""
        with pytest.raises(DialectNotSupportedError):
            Insert(dialect="postgres").insert_or("IGNORE INTO users")

    def test_overriding_rejected_on_sqlite(self) -> None:
        """Test SQLite has no OVERRIDING."""
        with pytest.raises(DialectNotSupportedError):
            Insert(dialect="sqlite").overriding("SYSTEM VALUE")

    def test_on_duplicate_key_update(self) -> None:
        """Test ON DUPLICATE KEY UPDATE accumulates on MySQL."""
        query = (
            insert("users (login, hits)", dialect="mysql")
            .values("('foo', 1)")
            .on_duplicate_key_update("hits = hits + 1")
            .on_duplicate_key_update("login = VALUES(login)")
            .as_string()
        )

        assert query == (
            "INSERT INTO users (login, hits) VALUES ('foo', 1) "
            "ON DUPLICATE KEY UPDATE hits = hits + 1, login = VALUES(login)"
        )

    def test_with_cte(self) -> None:
        """Test WITH followed by INSERT ... SELECT."""
        active_users = Select(dialect="postgres").select("*").from_("users_bk").where_clause("active = true")
        query = (
            Insert(dialect="postgres")
            .with_("active_users", active_users)
            .insert_into("users")
            .select(Select(dialect="postgres").select("*").from_("active_users"))
            .as_string()
        )

        assert query == (
            "WITH active_users AS (SELECT * FROM users_bk WHERE active = true) "
            "INSERT INTO users SELECT * FROM active_users"
        )

    def test_full_clause_order(self) -> None:
        """Test every PostgreSQL INSERT clause in grammar order."""
        query = (
            Insert(dialect="postgres")
            .returning("id")
            .on_conflict("DO NOTHING")
            .values("(1)")
            .overriding("USER VALUE")
            .insert_into("t (id)")
            .with_("x", "SELECT 1")
            .as_string()
        )

        assert query == (
            "WITH x AS (SELECT 1) INSERT INTO t (id) OVERRIDING USER VALUE VALUES (1) ON CONFLICT DO NOTHING RETURNING id"
        )


class TestInsertMultiline:
    """Test multi-line INSERT rendering."""

    def test_multiline(self) -> None:
        """Test one clause per line with the nested SELECT indented."""
        select = Select(dialect="postgres").select("login, name").from_("users_bk").where_clause("active = true")
        statement = Insert(dialect="postgres").insert_into("users (login, name)").select(select).returning("id")

        assert statement.render_multi_line() == (
            "INSERT INTO users (login, name)\n"
            "  SELECT login, name\n"
            "  FROM users_bk\n"
            "  WHERE active = true\n"
            "RETURNING id"
        )

    def test_debug_returns_builder(self, capture_config: BuilderConfig, output_stream: io.StringIO) -> None:
        """Test debug() prints and leaves the statement unchanged."""
        statement = Insert(config=capture_config).insert_into("users")

        assert statement.debug().as_string() == "INSERT INTO users"
        assert output_stream.getvalue() == "INSERT INTO users\n"
