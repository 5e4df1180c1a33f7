"""
Posts Schemas - Modeles Pydantic pour les endpoints articles.

Les reponses sont produites par les view models (to_response);
seuls les corps de requete sont decrits ici.
"""

from pydantic import BaseModel, Field


class WritePostRequest(BaseModel):
    """Requete de creation ou de modification d'article."""

    title: str = Field(..., max_length=200, description="Titre de l'article")
    body: str = Field("", description="Contenu de l'article")
