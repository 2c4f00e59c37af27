"""Dagger pipeline for the hello service.

Runs the unit suite in containers, across Python versions, and the e2e
suite against a live instance of the service bound as ``api``.
"""

import asyncio

import dagger as dg
from dagger import dag, function, object_type

SERVICE_PORT = 8000


@object_type
class HelloServiceCi:
    """CI functions for the hello service, built on uv images."""

    @function
    def test_container(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> dg.Container:
        """Base container with uv and the project source mounted at /app.

        Args:
            source: Project root (holds pyproject.toml)
            python_version: Python version of the uv image

        Returns:
            Container ready to install and run the project
        """
        uv_cache = dag.cache_volume("uv")

        return (
            dag.container()
            .from_(f"ghcr.io/astral-sh/uv:python{python_version}-bookworm-slim")
            .with_mounted_cache("/root/.cache/uv", uv_cache)
            .with_directory("/app", source)
            .with_workdir("/app")
            .with_env_variable("UV_SYSTEM_PYTHON", "1")
        )

    @function
    async def unit_test(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> str:
        """Run tests/unit with pytest and return its output."""
        return await self.run_test(source, "tests/unit", python_version)

    @function
    async def unit_test_matrix(
        self, source: dg.Directory, versions: str = "3.10,3.11,3.12"
    ) -> str:
        """Run the unit suite concurrently on each comma-separated Python version."""
        version_list = [v.strip() for v in versions.split(",") if v.strip()]

        async def test_version(version: str) -> str:
            try:
                result = await self.unit_test(source, version)
            except dg.ExecError as e:
                return f"Python {version}: FAILED\n{e.stdout}{e.stderr}"
            return f"Python {version}: PASSED\n{result}"

        results = await asyncio.gather(*[test_version(v) for v in version_list])

        output_lines = ["=== MULTI-VERSION TEST RESULTS ===", ""]
        for result in results:
            output_lines.extend([result, "=" * 50, ""])

        return "\n".join(output_lines)

    @function
    async def run_test(
        self, source: dg.Directory, path: str, python_version: str = "3.12"
    ) -> str:
        """Run pytest on a single path (file or directory)."""
        return await (
            self.test_container(source, python_version)
            .with_exec(["uv", "pip", "install", "-e", ".[test]"])
            .with_exec(["pytest", path, "-v", "--tb=short"])
            .stdout()
        )

    @function
    def api_service(
        self,
        source: dg.Directory,
        python_version: str = "3.12",
        greeting_name: str = "World",
    ) -> dg.Service:
        """The hello service listening on port 8000, for service binding.

        Args:
            source: Project root
            python_version: Python version of the uv image
            greeting_name: Value for HELLO_SERVICE_GREETING_NAME

        Returns:
            Service running ``python -m hello_service``
        """
        return (
            self.test_container(source, python_version)
            .with_exec(["uv", "pip", "install", "-e", "."])
            .with_env_variable("HELLO_SERVICE_PORT", str(SERVICE_PORT))
            .with_env_variable("HELLO_SERVICE_GREETING_NAME", greeting_name)
            .with_exposed_port(SERVICE_PORT)
            .as_service(args=["python", "-m", "hello_service"])
        )

    @function
    async def test_api_service(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> str:
        """Smoke-test a live service with curl.

        Binds the service as ``api``, requests ``/`` as plain text and
        ``/health`` as JSON, and fails if the greeting lacks "Hello".
        """
        api_svc = self.api_service(source, python_version)
        base_url = f"http://api:{SERVICE_PORT}"

        test_client = (
            dag.container()
            .from_("alpine:latest")
            .with_exec(["apk", "add", "--no-cache", "curl", "jq"])
            .with_service_binding("api", api_svc)
        )

        greeting = await test_client.with_exec(
            ["curl", "-sf", "-H", "Accept: text/plain", f"{base_url}/"]
        ).stdout()
        if "Hello" not in greeting:
            raise ValueError(f"unexpected greeting from GET /: {greeting!r}")

        health_pretty = await test_client.with_exec(
            ["sh", "-c", f"curl -sf {base_url}/health | jq ."]
        ).stdout()

        result_lines = [
            "=== API SERVICE TEST RESULTS ===",
            "",
            "Root Endpoint (GET /):",
            greeting,
            "",
            "Health Endpoint (GET /health):",
            health_pretty,
            "",
            "All endpoints responded successfully!",
        ]

        return "\n".join(result_lines)

    @function
    async def integration_test(
        self, source: dg.Directory, python_version: str = "3.12"
    ) -> str:
        """Run tests/e2e against a live service bound as ``api``."""
        api_svc = self.api_service(source, python_version)

        return await (
            self.test_container(source, python_version)
            .with_service_binding("api", api_svc)
            .with_env_variable("API_BASE_URL", f"http://api:{SERVICE_PORT}")
            .with_exec(["uv", "pip", "install", "-e", ".[test]"])
            .with_exec(["pytest", "tests/e2e", "-v", "--tb=short"])
            .stdout()
        )
