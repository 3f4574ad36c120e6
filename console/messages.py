from __future__ import annotations

PLACEHOLDER = "main.commandLine.placeholder"
SHOW_HISTORY = "main.commandLine.showHistory"
SHOW_MESSAGES = "main.commandLine.showMessages"
NO_HISTORY = "main.commandLine.noHistory"
NO_LAST = "main.commandLine.noLast"
CANCELED = "main.commandLine.canceled"
EXECUTED = "main.commandLine.executed"
UNKNOWN_COMMAND = "main.commandLine.unknownCommand"
DISPATCH_FAILED = "main.commandLine.dispatchFailed"
PROMPT = "main.commandLine.prompt"

FALLBACKS: dict[str, str] = {
    PLACEHOLDER: "Type command",
    SHOW_HISTORY: "Show command history",
    SHOW_MESSAGES: "Show messages",
    NO_HISTORY: "(no history)",
    NO_LAST: "(no last command)",
    CANCELED: "*Cancel*",
    EXECUTED: "Executed",
    UNKNOWN_COMMAND: "Unknown command",
    DISPATCH_FAILED: "Command could not be sent",
    PROMPT: ">",
}
