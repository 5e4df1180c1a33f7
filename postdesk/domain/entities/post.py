"""
Entite Post - Article du back office.

Un article est un brouillon tant qu'il n'a pas d'identifiant:
l'identifiant est attribue par le repository a la premiere sauvegarde.

Regles:
-------
- Le titre est obligatoire et limite a MAX_TITLE_LENGTH caracteres
- Le corps peut etre vide
"""

from dataclasses import dataclass

from postdesk.domain.exceptions import InvalidPostError


MAX_TITLE_LENGTH = 200


@dataclass
class Post:
    """
    Article redige dans le back office.

    Attributes:
        id: Identifiant attribue par le repository (None pour un brouillon).
        title: Titre de l'article.
        body: Contenu de l'article.

    Example:
        >>> post = Post.create("Bonjour", "Premier article")
        >>> post.is_persisted
        False
    """

    id: int | None = None
    title: str = ""
    body: str = ""

    @classmethod
    def draft(cls) -> "Post":
        """Cree un article vierge (formulaire de creation)."""
        return cls()

    @classmethod
    def create(cls, title: str, body: str = "") -> "Post":
        """
        Factory pour creer un nouvel article.

        Args:
            title: Titre (obligatoire).
            body: Contenu.

        Returns:
            Article non persiste.

        Raises:
            InvalidPostError: Si le titre est invalide.
        """
        post = cls()
        post.update(title=title, body=body)
        return post

    def update(self, title: str, body: str = "") -> None:
        """
        Met a jour le titre et le contenu.

        Raises:
            InvalidPostError: Si le titre est vide ou trop long.
        """
        title = (title or "").strip()
        if not title:
            raise InvalidPostError("le titre est obligatoire")
        if len(title) > MAX_TITLE_LENGTH:
            raise InvalidPostError(
                f"le titre depasse {MAX_TITLE_LENGTH} caracteres"
            )
        self.title = title
        self.body = body or ""

    @property
    def is_persisted(self) -> bool:
        """True si l'article a deja ete sauvegarde."""
        return self.id is not None

    def excerpt(self, length: int = 80) -> str:
        """Debut du contenu, tronque sur un mot."""
        text = " ".join(self.body.split())
        if len(text) <= length:
            return text
        cut = text[: length + 1].rsplit(" ", 1)[0]
        if len(cut) > length:
            cut = text[:length]
        return f"{cut}..."
