from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from services.blog.app.logging import logger
from services.blog.app.models import Article, User
from services.blog.app.slug import slugify


class UserWriter(Protocol):
    def save_all(self, records: Sequence[User]) -> None: ...


class ArticleWriter(Protocol):
    def save_all(self, records: Sequence[Article]) -> None: ...


def seed_users() -> list[User]:
    return [
        User("bclozel", "Brian", "Clozel", "Spring Framework & Spring Boot @pivotal — @LaCordeeLyon coworker"),
        User(
            "MkHeck",
            "Mark",
            "Heckler",
            "Spring Developer Advocate @Pivotal. Computer scientist+MBA, inglés y español, @Java_Champions. "
            "Pragmatic optimist. #Spring #Reactive #Microservices #IoT #Cloud",
        ),
        User("poutsma", "Arjen", "Poutsma"),
        User("rstoyanchev", "Rossen", "Stoyanchev", "Spring Framework committer @Pivotal"),
        User(
            "sam_brannen",
            "Sam",
            "Brannen",
            "Core @SpringFramework & @JUnitTeam Committer. Enterprise @Java Consultant at @Swiftmind. "
            "#Spring Trainer. Spring User Group Lead at @JUGCH.",
        ),
        User(
            "sdeleuze",
            "Sebastien",
            "Deleuze",
            "Spring Framework committer @Pivotal, @Kotlin addict, #WebAssembly believer, @mixitconf organizer, "
            "#techactivism",
        ),
        User("simonbasle", "Simon", "Basle", "software development aficionado, Reactor Software Engineer @pivotal"),
        User(
            "smaldini",
            "Stephane",
            "Maldini",
            "Project Reactor Lead @Pivotal -All things Reactive and Distributed - ex Londoner - opinions != Pivotal",
        ),
        User(
            "snicoll",
            "Stephane",
            "Nicoll",
            "Proud husband. Passionate and enthusiastic Software engineer. Working on @springboot, "
            "@springframework & Spring Initializr at @Pivotal",
        ),
        User("springjuergen", "Juergen", "Hoeller"),
        User("violetagg", "Violeta", "Georgieva", "All views are my own!"),
    ]


def _article(title: str, headline: str, content: str, author: User, added_at: datetime) -> Article:
    return Article(
        slug=slugify(title),
        title=title,
        headline=headline,
        content=content,
        author=author,
        added_at=added_at,
    )


def seed_articles(users: Sequence[User]) -> list[Article]:
    """Build the demo articles. Authors are picked by reference from `users`, never looked up in storage."""
    by_login = {u.login: u for u in users}

    return [
        _article(
            "Reactor Bismuth is out",
            "It is my great pleasure to announce the GA release of **Reactor Bismuth**, which notably encompasses "
            "`reactor-core` **3.1.0.RELEASE** and `reactor-netty` **0.7.0.RELEASE** \U0001f389",
            "With the release of [Spring Framework 5.0](https://spring.io/blog/2017/09/28/spring-framework-5-0-goes-ga) "
            "now just happening, you can imagine this is a giant step for Project Reactor :)\n",
            by_login["simonbasle"],
            datetime(2017, 9, 28, 12, 0),
        ),
        _article(
            "Spring Framework 5.0 goes GA",
            "Dear Spring community,\n\nIt is my pleasure to announce that, after more than a year of milestones and "
            "RCs and almost two years of development overall, Spring Framework 5.0 is finally generally available as "
            "5.0.0.RELEASE from [repo.spring.io](https://repo.spring.io) and Maven Central!",
            "This brand-new generation of the framework is ready for 2018 and beyond: with support for JDK 9 and the "
            "Java EE 8 API level (e.g. Servlet 4.0), as well as comprehensive integration with Reactor 3.1, JUnit 5, "
            "and the Kotlin language. On top of that all, Spring Framework 5 comes with many functional API variants "
            "and introduces a dedicated reactive web framework called Spring WebFlux, next to a revised version of "
            "our Servlet-based web framework Spring MVC.",
            by_login["springjuergen"],
            datetime(2017, 9, 28, 11, 30),
        ),
        _article(
            "Introducing Kotlin support in Spring Framework 5.0",
            "Following the [Kotlin support on start.spring.io]"
            "(https://spring.io/blog/2016/02/15/developing-spring-boot-applications-with-kotlin) we introduced a few "
            "months ago, we have continued to work to ensure that Spring and [Kotlin](https://kotlin.link/) play well "
            "together.",
            "One of the key strengths of Kotlin is that it provides a very good "
            "[interoperability](https://kotlinlang.org/docs/reference/java-interop.html) with libraries written in "
            "Java. But there are ways to go even further and allow writing fully idiomatic Kotlin code when "
            "developing your next Spring application. In addition to Spring Framework support for Java 8 that Kotlin "
            "applications can leverage like functional web or bean registration APIs, there are additional Kotlin "
            "dedicated features that should allow you to reach a new level of productivity.",
            by_login["sdeleuze"],
            datetime(2017, 1, 4, 9, 0),
        ),
    ]


def run_seed(user_repository: UserWriter, article_repository: ArticleWriter) -> None:
    """
    Insert the demo users, then the demo articles, as two batch writes.

    Users go first so every article author already exists. Storage errors propagate
    unchanged and abort the remaining steps.
    """
    logger.info("seed_started")
    try:
        users = seed_users()
        user_repository.save_all(users)
        logger.info("seed_users_saved", count=len(users))

        articles = seed_articles(users)
        article_repository.save_all(articles)
        logger.info("seed_articles_saved", count=len(articles))
    except Exception as exc:
        logger.error("seed_failed", error=str(exc), error_type=type(exc).__name__)
        raise
    logger.info("seed_completed", users=len(users), articles=len(articles))
