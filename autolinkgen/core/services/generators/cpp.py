"""
C++ generator — produce autolinking.cpp and autolinking.h.

autolinking.cpp implements three provider functions the app's native
entry point calls at startup:

    autolinking_ModuleProvider        Java TurboModules, tried in order
    autolinking_cxxModuleProvider     pure C++ TurboModules, by kModuleName
    autolinking_registerProviders     Fabric component descriptors

autolinking.h is constant and only declares those three functions.
"""

from __future__ import annotations

from collections.abc import Iterable

from autolinkgen.core.models.autolinking import AndroidDependency

COMPONENT_INCLUDE_PATH = "react/renderer/components"
COMPONENT_DESCRIPTOR_FILENAME = "ComponentDescriptors.h"

_BANNER = """\
/**
 * This code was generated by [React Native](https://www.npmjs.com/package/@react-native/gradle-plugin).
 *
 * Do not edit this file as changes may cause incorrect behavior and will be lost
 * once the code is regenerated.
 *
 */"""

CPP_TEMPLATE = (
    _BANNER
    + """

#include "autolinking.h"
{{ autolinkingCppIncludes }}

namespace facebook {
namespace react {

std::shared_ptr<TurboModule> autolinking_ModuleProvider(const std::string moduleName, const JavaTurboModule::InitParams &params) {
{{ autolinkingModuleProviders }}
  return nullptr;
}

std::shared_ptr<TurboModule> autolinking_cxxModuleProvider(const std::string moduleName, const std::shared_ptr<CallInvoker>& jsInvoker) {
{{ autolinkingCxxModuleProviders }}
  return nullptr;
}

void autolinking_registerProviders(std::shared_ptr<ComponentDescriptorProviderRegistry const> providerRegistry) {
{{ autolinkingComponentDescriptors }}
  return;
}

} // namespace react
} // namespace facebook"""
)

H_TEMPLATE = (
    _BANNER
    + """

#pragma once

#include <ReactCommon/CallInvoker.h>
#include <ReactCommon/JavaTurboModule.h>
#include <ReactCommon/TurboModule.h>
#include <jsi/jsi.h>
#include <react/renderer/componentregistry/ComponentDescriptorProviderRegistry.h>

namespace facebook {
namespace react {

std::shared_ptr<TurboModule> autolinking_ModuleProvider(const std::string moduleName, const JavaTurboModule::InitParams &params);
std::shared_ptr<TurboModule> autolinking_cxxModuleProvider(const std::string moduleName, const std::shared_ptr<CallInvoker>& jsInvoker);
void autolinking_registerProviders(std::shared_ptr<ComponentDescriptorProviderRegistry const> providerRegistry);

} // namespace react
} // namespace facebook"""
)


# ── Section renderers ───────────────────────────────────────────


def _includes(dep: AndroidDependency) -> list[str]:
    lines = []
    if dep.has_module_provider:
        lines.append(f"#include <{dep.library_name}.h>")
    if dep.has_component_descriptors:
        lines.append(
            f"#include <{COMPONENT_INCLUDE_PATH}/{dep.library_name}/{COMPONENT_DESCRIPTOR_FILENAME}>"
        )
    if dep.has_cxx_module:
        lines.append(f"#include <{dep.cxx_module_header_name}.h>")
    return lines


def _module_provider(dep: AndroidDependency) -> str:
    name = dep.library_name
    return (
        f"auto module_{name} = {name}_ModuleProvider(moduleName, params);\n"
        f"if (module_{name} != nullptr) {{\n"
        f"return module_{name};\n"
        f"}}"
    )


def _cxx_module_provider(dep: AndroidDependency) -> str:
    header = dep.cxx_module_header_name
    return (
        f"if (moduleName == {header}::kModuleName) {{\n"
        f"return std::make_shared<{header}>(jsInvoker);\n"
        f"}}"
    )


def _component_descriptors(dep: AndroidDependency) -> str:
    return "\n".join(
        f"providerRegistry->add(concreteComponentDescriptorProvider<{descriptor}>());"
        for descriptor in dep.component_descriptors
    )


# ── Public API ──────────────────────────────────────────────────


def generate_cpp_file_content(packages: Iterable[AndroidDependency]) -> str:
    """Render autolinking.cpp for the given descriptors.

    A descriptor feeds each provider function only when the fields that
    function needs are present; anything else is left out silently.

    Args:
        packages: Android descriptors, in dependency order.

    Returns:
        The file text (no trailing newline).
    """
    packages = list(packages)

    includes = "\n".join(line for dep in packages for line in _includes(dep))
    module_providers = "\n".join(
        _module_provider(dep) for dep in packages if dep.has_module_provider
    )
    cxx_module_providers = "\n".join(
        _cxx_module_provider(dep) for dep in packages if dep.has_cxx_module
    )
    component_descriptors = "\n".join(
        _component_descriptors(dep) for dep in packages if dep.has_component_descriptors
    )

    return (
        CPP_TEMPLATE.replace("{{ autolinkingCppIncludes }}", includes)
        .replace("{{ autolinkingModuleProviders }}", module_providers)
        .replace("{{ autolinkingCxxModuleProviders }}", cxx_module_providers)
        .replace("{{ autolinkingComponentDescriptors }}", component_descriptors)
    )


def generate_header_file_content() -> str:
    """Render autolinking.h (constant)."""
    return H_TEMPLATE
