"""
fsunit - A filesystem sandbox for tests.

Module-level API:
    import fsunit

    fsunit.init_sandbox()
    fsunit.add_folder("out")
    fsunit.add_file("report.txt", folder="out")
    fsunit.set_content("report.txt", "done", folder="out")
    fsunit.assert_file_content_equals("out/report.txt", "done")
    fsunit.clear_sandbox()

With pytest, request the ``fs_sandbox`` fixture instead of calling
init_sandbox()/clear_sandbox() yourself.
"""

# =============================================================================
# Sandbox lifecycle and file operations
# =============================================================================
from fsunit.sandbox import (  # noqa: F401
    init_sandbox,
    clear_sandbox,
    sandbox_session,
    get_root,
    get_root_folder,
    get_file,
    get_path,
    open_input,
    add_file,
    add_folder,
    set_content,
    get_content,
    delete,
)

# =============================================================================
# Assertions
# =============================================================================
from fsunit.assertions import (  # noqa: F401
    assert_init_ok,
    assert_file_exists,
    assert_file_not_exists,
    assert_is_file,
    assert_is_directory,
    assert_directory_contains,
    assert_directory_size,
    assert_file_content_equals,
    assert_file_size_equals,
    assert_file_size_lower_than,
    assert_file_size_greater_than,
    assert_zip_contains,
)

# =============================================================================
# Inspection and errors
# =============================================================================
from fsunit.archive import zip_entries  # noqa: F401
from fsunit.snapshot import Entry, Snapshot, list_dir, snapshot  # noqa: F401
from fsunit.exceptions import (  # noqa: F401
    FSUnitError,
    SandboxAssertionError,
    SandboxIOError,
    SandboxPathError,
)

__version__ = "0.1.0"
