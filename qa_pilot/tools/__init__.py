from .filesystem import (
	list_files,
	run_command,
	write_file,
	write_file_if_absent,
)

__all__ = [
	"list_files",
	"run_command",
	"write_file",
	"write_file_if_absent",
]
