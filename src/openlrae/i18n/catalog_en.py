"""English message templates."""

MESSAGES = {
    # Risk categories
    "risk.COMPONENTS_LICENSES_INCOMPATIBLE_WITH_PROJECT_LICENSES":
        "Having components licenses incompatible with project licenses",
    "risk.LIMITED_SET_OF_POTENTIAL_PROJECT_LICENSES":
        "Having a limited set of potential project licenses",
    "risk.LIMITED_SET_OF_POTENTIAL_COMPONENTS_LICENSES":
        "Having a limited set of potential components licenses",
    "risk.OBSOLETE_PROJECT_LICENSES": "Having obsolete project licenses",
    "risk.OBSOLETE_COMPONENTS_LICENSES": "Having obsolete components licenses",
    "risk.UNFASHIONABLE_PROJECT_LICENSES": "Having unfashionable project licenses",
    "risk.UNFASHIONABLE_COMPONENTS_LICENSES": "Having unfashionable components licenses",
    "risk.SCARCELY_SPREAD_PROJECT_LICENSES": "Having scarcely spread project licenses",
    "risk.SCARCELY_SPREAD_COMPONENTS_LICENSES": "Having scarcely spread components licenses",
    "risk.HETEROGENEOUS_COMPONENTS_LICENSES": "Having heterogeneous components licenses",
    "risk.COMPONENTS_LICENSES_MISALIGNED_FROM_PROJECT_LICENSES":
        "Having components licenses misaligned from project licenses",

    # Value labels
    "link.STATIC": "linked statically",
    "link.DYNAMIC": "linked dynamically",
    "redistribution.NONE": "is not redistributed",
    "redistribution.SOFTWARE_PACKAGE": "is redistributed as a software package",
    "redistribution.SAAS": "is offered as a service (SaaS)",
    "compatibility.COMPATIBLE": "fully compatible",
    "compatibility.FORCED_COMPATIBLE": "forced to be compatible",
    "compatibility.MOSTLY_COMPATIBLE": "compatible in most cases",
    "compatibility.MOSTLY_UNCOMPATIBLE": "incompatible in most cases",
    "compatibility.UNCOMPATIBLE": "incompatible",
    "compatibility.UNKNOWN": "of unknown compatibility",
    "compatibility.UNSUPPORTED": "not supported yet",
    "obsolescence.UPDATED": "latest version",
    "obsolescence.NEAR_UPDATED": "recent, but not the latest, version",
    "obsolescence.NEAR_OUTDATED": "old version",
    "obsolescence.OUTDATED": "oldest version",
    "spreading.HIGHLY_WIDESPREAD": "highly widespread",
    "spreading.NEAR_HIGHLY_WIDESPREAD": "widespread",
    "spreading.NEAR_LITTLE_WIDESPREAD": "little widespread",
    "spreading.LITTLE_WIDESPREAD": "rarely used",
    "trend.TRENDY": "trendy",
    "trend.NEAR_TRENDY": "stable",
    "trend.NEAR_UNFASHIONABLE": "slowly losing adopters",
    "trend.UNFASHIONABLE": "unfashionable",
    "binding.full_name": "{name}-{version} ({license}), {link}",

    # Knowledge base warnings
    "warning.copyleft-upgrade-required":
        "{binding} can only be included in a project released under {project_license} if the "
        "combined work is distributed under a stronger copyleft license.",
    "warning.agpl-gpl3-section13":
        "{binding} may be combined with {project_license} code thanks to section 13 of the "
        "GPL-3.0 and AGPL-3.0, but the AGPL network clause keeps applying to its part.",
    "warning.apache-patent-terms":
        "The patent termination clauses of the license of {binding} are only compatible with "
        "{project_license} when the project is finally distributed under GPL-3.0.",
    "warning.gpl2-only-restricts-or-later":
        "Including {binding} forces the whole {project_license} project to be distributed "
        "under GPL-2.0 only.",
    "warning.gpl3-only-restricts-or-later":
        "Including {binding} forces the whole {project_license} project to be distributed "
        "under GPL-3.0 only.",
    "warning.eupl-compatibility-list":
        "{binding} and {project_license} can only be combined through the compatibility list "
        "of the EUPL, check that your use is covered by it.",
    "warning.lgpl-conversion-to-gpl":
        "{binding} can be included in a project released under {project_license} by using the "
        "clause of the LGPL that allows converting the component to the GPL.",
    "warning.lgpl-version-lock":
        "{binding} and {project_license} refer to different LGPL versions, and only some of "
        "their combinations are allowed.",

    # Components incompatible with project licenses
    "incompatible.root.uncompatible":
        "{binding} is incompatible with a project released under {project_license} that {redistribution}.",
    "incompatible.root.mostly_uncompatible":
        "{binding} is incompatible with a project released under {project_license} in most cases.",
    "incompatible.root.mostly_compatible":
        "{binding} is compatible with a project released under {project_license} in most, but not all, cases.",
    "incompatible.root.unknown":
        "It is not known whether {binding} is compatible with a project released under "
        "{project_license} that {redistribution}.",
    "incompatible.root.undefined":
        "{binding} has no defined license, which legally means all rights reserved. It is "
        "handled as incompatible with {project_license}.",
    "incompatible.root.unsupported":
        "The license of {binding} is not supported yet, so it is handled as incompatible with {project_license}.",
    "incompatible.warning.forced":
        "{binding} is forced to be compatible with {project_license}. Be sure you have written "
        "permission from the copyright holder of the component.",
    "incompatible.warning.mostly":
        "Although {binding} can often be included in {project_license} projects, carry out a deep "
        "analysis to be sure your specific case is not one of the exceptions.",
    "incompatible.warning.unsupported":
        "{binding} might be compatible with {project_license} once its license is supported. "
        "We apologize for the inconvenience.",
    "incompatible.warning.saturated":
        "Legal incompatibilities are not diluted by usage share, so the risk value has been "
        "raised to at least {floor}.",
    "incompatible.good.compatible":
        "{binding} is natively compatible and can be included in a project released under {project_license}.",
    "incompatible.good.forced":
        "{binding} is forced to be fully compatible and can be included in a project released under {project_license}.",
    "incompatible.tip.replace":
        "Try replacing {binding} by another component whose license is compatible with {project_license}.",
    "incompatible.tip.clarify":
        "Contact the authors of {binding} to clarify its license and whether it is compatible "
        "with {project_license}.",
    "incompatible.tip.check":
        "Check the terms of the license of {binding} against {project_license} in your specific "
        "case before using the component in the project.",
    "incompatible.tip.general.fully_compatible":
        "General tip: Even when a component that is not fully compatible can be used in your "
        "case, prefer components whose license is compatible under all circumstances.",
    "general.tip.static_links":
        "General tip: Try not to link components statically, as it is more likely to cause incompatibilities.",
    "general.tip.own_rights":
        "General tip: If you own all the rights on a risky component, try changing its license "
        "instead of looking for another component.",
    "general.tip.permissive":
        "General tip: Try to use components under permissive licenses, as they are less likely "
        "to cause licensing risks.",

    # Limited set of potential project licenses
    "limited_project.root.blocked":
        "{candidate} could not be used as project license because {binding} is {compatibility} with it.",
    "limited_project.root.partial":
        "{candidate} could be used as project license, but {binding} is {compatibility} with it.",
    "limited_project.root.none":
        "There is no open source license compatible with all the licenses of the components.",
    "limited_project.warning.unsupported":
        "Some licenses could not be used as project license because the license of {binding} is "
        "not supported yet. They might become usable once it is.",
    "limited_project.good.usable":
        "{candidate} can be used as project license, because all the components are compatible "
        "with it when the project {redistribution}.",
    "limited_project.tip.replace":
        "Try replacing {binding} by another component compatible with more potential project licenses.",
    "limited_project.tip.root_causes_first":
        "When changing components to reduce this risk, start with those that are root causes in more cases.",
    "limited_project.tip.contribution_first":
        "When changing components to reduce this risk, start with those with the highest "
        "contribution to the project.",
    "limited_project.tip.many_licenses":
        "General tip: Prefer components whose licenses are compatible with many potential "
        "project licenses, so the project license can change in the future.",

    # Limited set of potential components licenses
    "limited_components.root.blocked":
        "Components released under {candidate} cannot be {link} into the project, because they "
        "are {compatibility} with {project_license}.",
    "limited_components.root.none":
        "No open source license is fully compatible with the project licenses for components {link}.",
    "limited_components.good.usable":
        "Components released under {candidate} can be {link} into the project.",
    "limited_components.tip.single_license":
        "General tip: Try to release the project under a single license. The more project "
        "licenses, the fewer component licenses are compatible with all of them.",
    "limited_components.tip.permissive_project":
        "General tip: Permissive project licenses accept fewer copyleft components, and strong "
        "copyleft project licenses accept most permissive ones. Choose the project license with "
        "the components you will need in mind.",
    "limited_components.tip.dynamic":
        "General tip: Linking components dynamically usually widens the set of acceptable licenses.",

    # Obsolescence
    "obsolete_project.root": "The project is released under {license}, which is the {value} of the license.",
    "obsolete_project.good": "The project is released under {license}, which is the {value} of the license.",
    "obsolete_project.tip": "Try releasing the project under a newer version of {license}, if possible.",
    "obsolete_project.tip.general":
        "General tip: Keep the project licenses in their latest versions, as it is less likely "
        "to cause incompatibilities and maintenance troubles.",
    "obsolete_components.root": "{binding} uses the {value} of its license.",
    "obsolete_components.good": "{binding} uses the {value} of its license.",
    "obsolete_components.tip":
        "Try replacing {binding} by a component released under a newer license version, if possible.",
    "obsolete_components.tip.general":
        "General tip: Apart from a newer version of the same license, you could use other "
        "modern licenses that are also compatible with the project.",

    # Trends
    "unfashionable_project.root": "The project is released under {license}, which is {value}.",
    "unfashionable_project.good": "The project is released under {license}, which is {value}.",
    "unfashionable_project.tip": "Try releasing the project under a license more trendy than {license}, if possible.",
    "unfashionable_project.tip.general":
        "General tip: Releasing the project under a single license makes it easier to keep it on trend.",
    "unfashionable_components.root": "{binding} uses a license that is {value}.",
    "unfashionable_components.good": "{binding} uses a license that is {value}.",
    "unfashionable_components.tip":
        "Try replacing {binding} by a component released under a more trendy license, if possible.",
    "unfashionable_components.tip.general":
        "General tip: Trendy licenses attract more contributors and more compatible components.",

    # Spreading
    "scarce_project.root": "The project is released under {license}, which is {value}.",
    "scarce_project.good": "The project is released under {license}, which is {value}.",
    "scarce_project.tip": "Try releasing the project under a license more spread than {license}, if possible.",
    "scarce_project.tip.general":
        "General tip: Sometimes a different version of the same license is more spread; it may "
        "not be necessary to change to a very different license.",
    "scarce_components.root": "{binding} uses a license that is {value}.",
    "scarce_components.good": "{binding} uses a license that is {value}.",
    "scarce_components.tip":
        "Try replacing {binding} by a component released under a more spread license, if possible.",
    "scarce_components.tip.general":
        "General tip: Components under widespread licenses are easier to replace and to combine.",
    "property.warning.synthetic":
        "The license of {binding} is {license}, so it is handled as the worst case.",

    # Heterogeneous components licenses
    "heterogeneous.root":
        "{binding} uses a license different from the most representative license of the "
        "components ({main_license}).",
    "heterogeneous.good": "{binding} uses the most representative license of the components.",
    "heterogeneous.warning.count":
        "The components use {count} different licenses. Their legal terms have to be taken into "
        "account each time a component is included or the project license changes.",
    "heterogeneous.warning.main":
        "{main_license} has been chosen as the most representative license because it is used "
        "by the most relevant components.",
    "heterogeneous.tip": "Try replacing {binding} by a component released under {main_license}.",
    "heterogeneous.tip.general":
        "General tip: Try not to include a derivative work of a component under a different "
        "license than the original component.",

    # Components misaligned from project licenses
    "misaligned.root": "{binding} uses a license that is different from {project_licenses}.",
    "misaligned.good": "{binding} uses the same license as the project.",
    "misaligned.good.forced": "{binding} has permission to be used under the project license.",
    "misaligned.tip": "Try replacing {binding} by a component released under {project_licenses}.",
    "misaligned.tip.general":
        "General tip: Components under the same license as the project never raise licensing incompatibilities.",

    # Engine
    "engine.root.failure": "The analysis could not be completed: {error}",

    # Reports
    "report.project": "Project name",
    "report.version": "Project version",
    "report.licenses": "Project licenses",
    "report.redistribution": "Project redistribution",
    "report.bindings": "Component bindings",
    "report.contribution": "Contribution to the project",
    "report.risk_analysis": "Risk analysis",
    "report.scores": "Risk = {value} (Exposure = {exposure}, Impact = {impact})",
    "report.rootcauses": "Root causes",
    "report.warnings": "Warnings",
    "report.goodthings": "Good things",
    "report.tips": "Tips to mitigate the risk",
}
