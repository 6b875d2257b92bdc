"""Helper utilities for constructing temporary cmdlet package trees in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Iterable

START_VM_MODULE = """
from helpgen.metadata import Alias, Cmdlet, Parameter, ParameterAttribute, SwitchParameter, cmdlet


@cmdlet("Start", "AzureVM")
class StartAzureVMCommand(Cmdlet):
    name = Parameter(str, ParameterAttribute(mandatory=True, position=0), Alias("n"))
    force = Parameter(SwitchParameter, ParameterAttribute())


@cmdlet("Stop", "AzureVM")
class StopAzureVMCommand(Cmdlet):
    name = Parameter(str, ParameterAttribute(parameter_set_name="ByName", mandatory=True, position=0))
    id = Parameter(str, ParameterAttribute(parameter_set_name="ById", mandatory=True), Alias("i"))
    timeout = Parameter(int, ParameterAttribute())


class NotACmdlet:
    pass
"""

STOP_VM_HELP = """
<helpItems schema="maml" xmlns="http://msh">
  <command:command xmlns:maml="http://schemas.microsoft.com/maml/2004/10"
                   xmlns:command="http://schemas.microsoft.com/maml/dev/command/2004/10"
                   xmlns:dev="http://schemas.microsoft.com/maml/dev/2004/10">
    <command:details>
      <command:name>Stop-AzureVM</command:name>
      <maml:description>
        <maml:para>Stops a virtual machine.</maml:para>
      </maml:description>
    </command:details>
    <maml:description>
      <maml:para>Stops the machine and releases its compute.</maml:para>
      <maml:para>Disks are kept.</maml:para>
    </maml:description>
    <command:syntax>
      <command:syntaxItem>
        <maml:name>Stop-AzureVM</maml:name>
        <command:parameter required="true" position="0">
          <maml:name>Name</maml:name>
          <maml:description><maml:para>Name of the machine.</maml:para></maml:description>
          <command:parameterValue required="true">String</command:parameterValue>
        </command:parameter>
        <command:parameter required="false" position="named">
          <maml:name>Timeout</maml:name>
          <command:parameterValue required="true">Int32</command:parameterValue>
        </command:parameter>
      </command:syntaxItem>
      <command:syntaxItem>
        <maml:name>Stop-AzureVM</maml:name>
        <command:parameter required="true" position="named">
          <maml:name>Id</maml:name>
          <command:parameterValue required="true">String</command:parameterValue>
        </command:parameter>
      </command:syntaxItem>
    </command:syntax>
    <command:parameters>
      <command:parameter>
        <maml:name>Timeout</maml:name>
        <maml:description><maml:para>Seconds to wait.</maml:para></maml:description>
      </command:parameter>
    </command:parameters>
  </command:command>
</helpItems>
"""


class PackageBuilder:
    """Writes a packages root with one or more cmdlet packages."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "packages"
        self.root.mkdir()

    def package(self, name: str, version: str = "1.0.0") -> Path:
        path = self.root / name / version
        (path / "_indexes").mkdir(parents=True, exist_ok=True)
        (path / "lib").mkdir(exist_ok=True)
        (path / "content").mkdir(exist_ok=True)
        return path

    def write(self, path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    def index(self, package: Path, rows: Iterable[str]) -> Path:
        return self.write(package / "_indexes" / "_cmdlets.idx", "\n".join(rows) + "\n")

    def vm_package(self, name: str = "vm-pkg", *, with_help: bool = True) -> Path:
        """Write the sample VM package used across tests."""
        package = self.package(name)
        self.write(package / "lib" / "py3" / f"{name.replace('-', '_')}_commands.py", START_VM_MODULE)
        assembly = f"{name.replace('-', '_')}_commands.py"
        self.index(
            package,
            [
                f"vm;start:{assembly}/StartAzureVMCommand",
                f"vm;stop:{assembly}/StopAzureVMCommand",
            ],
        )
        if with_help:
            self.write(package / "content" / f"{assembly}-help.xml", STOP_VM_HELP)
        return package


__all__ = ["PackageBuilder", "START_VM_MODULE", "STOP_VM_HELP"]
