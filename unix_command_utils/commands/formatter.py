"""Formateurs pour les messages d'exécution de commandes.

Ce module fournit une hiérarchie de formateurs permettant d'afficher
le compte rendu d'une exécution différemment selon la destination
(fichier de log ou console).

Classes :
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Texte brut (logs fichier).
    AnsiCommandFormatter : Codes ANSI colorés pour la console.

Format d'une exécution (texte brut) :

    <commande>
    \\t<sortie>              (si log_output et sortie non vide)
    \\tExit value = <code>   (si code non nul)

Note :
    AnsiCommandFormatter vérifie automatiquement si la sortie est
    un terminal (TTY) avant d'émettre des codes ANSI, évitant
    ainsi de polluer les pipes ou les redirections.
"""

import sys
from abc import ABC, abstractmethod


class CommandFormatter(ABC):
    """Interface abstraite pour formater les messages de commande."""

    @abstractmethod
    def format_execution(
        self,
        command_text: str,
        output: str,
        exit_code: int,
        log_output: bool,
    ) -> str:
        """Formate le compte rendu d'une exécution terminée.

        Args:
            command_text: Commande sous forme de texte.
            output: Sortie capturée.
            exit_code: Code de retour observé.
            log_output: Inclure la sortie dans le message.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_dry_run(self, command_text: str) -> str:
        """Formate le message de simulation (mode dry-run).

        Args:
            command_text: Commande sous forme de texte.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_spawn_failure(
        self, command_text: str, error: Exception
    ) -> str:
        """Formate le message d'échec de démarrage du processus.

        Args:
            command_text: Commande sous forme de texte.
            error: Exception levée au démarrage.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass


class PlainCommandFormatter(CommandFormatter):
    """Formateur texte brut pour les logs fichier.

    Example :
        Commande réussie avec sortie :
            ls -la
                total 0

        Commande en échec sans sortie :
            false
                Exit value = 1
    """

    def format_execution(
        self,
        command_text: str,
        output: str,
        exit_code: int,
        log_output: bool,
    ) -> str:
        """Formate le compte rendu d'une exécution."""
        message = command_text
        if log_output and output:
            message += f"\n\t{output}"
        if exit_code != 0:
            message += f"\n\tExit value = {exit_code}"
        return message

    def format_dry_run(self, command_text: str) -> str:
        """Formate le message de simulation."""
        return f"[dry-run] {command_text}"

    def format_spawn_failure(
        self, command_text: str, error: Exception
    ) -> str:
        """Formate l'échec de démarrage."""
        return (
            f"Erreur au démarrage du processus : {command_text} "
            f"({type(error).__name__}: {error})"
        )


class AnsiCommandFormatter(CommandFormatter):
    """Formateur ANSI coloré pour la sortie console.

    Le texte est celui de PlainCommandFormatter. Seule la première
    ligne (la commande) est stylisée : vert si le code retour est
    nul, jaune-or gras sinon. Les échecs de démarrage sont en rouge.

    N'émet aucun code ANSI si stdout n'est pas un terminal TTY.
    """

    RESET = "\033[0m"
    SUCCESS_STYLE = "\033[0;32m"  # Vert normal
    FAILURE_STYLE = "\033[1;33m"  # Jaune-or gras
    ERROR_STYLE = "\033[1;31m"    # Rouge gras
    DRY_STYLE = "\033[0;90m"      # Gris discret

    def __init__(self) -> None:
        self._plain = PlainCommandFormatter()

    def _is_tty(self) -> bool:
        """Vérifie si stdout est un terminal interactif (TTY)."""
        return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

    def _apply_style(self, text: str, style: str) -> str:
        """Applique le style ANSI si on est dans un TTY.

        Args:
            text: Texte à styliser.
            style: Séquence ANSI à appliquer.

        Returns:
            Texte avec codes ANSI si TTY, texte brut sinon.
        """
        if not self._is_tty():
            return text
        return f"{style}{text}{self.RESET}"

    def format_execution(
        self,
        command_text: str,
        output: str,
        exit_code: int,
        log_output: bool,
    ) -> str:
        """Formate l'exécution avec la commande colorée."""
        plain = self._plain.format_execution(
            command_text, output, exit_code, log_output
        )
        style = self.SUCCESS_STYLE if exit_code == 0 else self.FAILURE_STYLE
        first, sep, rest = plain.partition("\n")
        return self._apply_style(first, style) + sep + rest

    def format_dry_run(self, command_text: str) -> str:
        """Formate le message de simulation en gris discret."""
        return self._apply_style(
            self._plain.format_dry_run(command_text), self.DRY_STYLE
        )

    def format_spawn_failure(
        self, command_text: str, error: Exception
    ) -> str:
        """Formate l'échec de démarrage en rouge."""
        return self._apply_style(
            self._plain.format_spawn_failure(command_text, error),
            self.ERROR_STYLE,
        )
