# timetrack/tasks/constants.py

# Keyword sets are matched as substrings of the lower-cased status, in this order
COMPLETED_KEYWORDS = (
    "concluído", "concluida", "complete", "done", "closed",
    "finalizado", "entregue", "completo",
)

BLOCKED_KEYWORDS = ("bloqueado", "blocked", "impedido", "parado", "aguardando")

IN_PROGRESS_KEYWORDS = (
    "andamento", "progress", "desenvolvimento", "execução",
    "fazendo", "doing", "review", "revisão",
)

# Priority aliases are matched exactly (ClickUp numeric codes included)
PRIORITY_ALIASES = {
    # urgente
    "urgente": "urgente",
    "urgent": "urgente",
    "0": "urgente",
    # alta
    "alta": "alta",
    "high": "alta",
    "1": "alta",
    # normal
    "normal": "normal",
    "média": "normal",
    "media": "normal",
    "2": "normal",
    # baixa
    "baixa": "baixa",
    "low": "baixa",
    "3": "baixa",
}

PRIORITY_LABELS = {
    "urgente": "Urgente (P0)",
    "alta": "Alta (P1)",
    "normal": "Normal (P2)",
    "baixa": "Baixa (P3)",
    "sem_prioridade": "Sem prioridade",
}

UNASSIGNED = "Sem responsável"
NO_PROJECT = "Sem projeto"

ASSIGNEE_SEPARATOR = "/"

PENALTY_WEIGHTS = {
    "assignee": 15,
    "due_date": 10,
    "priority": 5,
    "start_date": 2,
    "estimate": 5,
    "description": 1,
}
