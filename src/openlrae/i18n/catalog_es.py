"""Spanish message templates."""

MESSAGES = {
    # Risk categories
    "risk.COMPONENTS_LICENSES_INCOMPATIBLE_WITH_PROJECT_LICENSES":
        "Tener licencias de componentes incompatibles con las licencias del proyecto",
    "risk.LIMITED_SET_OF_POTENTIAL_PROJECT_LICENSES":
        "Tener un conjunto limitado de licencias potenciales para el proyecto",
    "risk.LIMITED_SET_OF_POTENTIAL_COMPONENTS_LICENSES":
        "Tener un conjunto limitado de licencias potenciales para los componentes",
    "risk.OBSOLETE_PROJECT_LICENSES": "Tener licencias del proyecto obsoletas",
    "risk.OBSOLETE_COMPONENTS_LICENSES": "Tener licencias de componentes obsoletas",
    "risk.UNFASHIONABLE_PROJECT_LICENSES": "Tener licencias del proyecto en desuso",
    "risk.UNFASHIONABLE_COMPONENTS_LICENSES": "Tener licencias de componentes en desuso",
    "risk.SCARCELY_SPREAD_PROJECT_LICENSES": "Tener licencias del proyecto poco extendidas",
    "risk.SCARCELY_SPREAD_COMPONENTS_LICENSES": "Tener licencias de componentes poco extendidas",
    "risk.HETEROGENEOUS_COMPONENTS_LICENSES": "Tener licencias de componentes heterogéneas",
    "risk.COMPONENTS_LICENSES_MISALIGNED_FROM_PROJECT_LICENSES":
        "Tener licencias de componentes no alineadas con las licencias del proyecto",

    # Value labels
    "link.STATIC": "enlazado estáticamente",
    "link.DYNAMIC": "enlazado dinámicamente",
    "redistribution.NONE": "no se redistribuye",
    "redistribution.SOFTWARE_PACKAGE": "se redistribuye como paquete software",
    "redistribution.SAAS": "se ofrece como servicio (SaaS)",
    "compatibility.COMPATIBLE": "totalmente compatible",
    "compatibility.FORCED_COMPATIBLE": "forzado a ser compatible",
    "compatibility.MOSTLY_COMPATIBLE": "compatible en la mayoría de casos",
    "compatibility.MOSTLY_UNCOMPATIBLE": "incompatible en la mayoría de casos",
    "compatibility.UNCOMPATIBLE": "incompatible",
    "compatibility.UNKNOWN": "de compatibilidad desconocida",
    "compatibility.UNSUPPORTED": "no soportado todavía",
    "obsolescence.UPDATED": "última versión",
    "obsolescence.NEAR_UPDATED": "versión reciente, pero no la última,",
    "obsolescence.NEAR_OUTDATED": "versión antigua",
    "obsolescence.OUTDATED": "versión más antigua",
    "spreading.HIGHLY_WIDESPREAD": "muy extendida",
    "spreading.NEAR_HIGHLY_WIDESPREAD": "extendida",
    "spreading.NEAR_LITTLE_WIDESPREAD": "poco extendida",
    "spreading.LITTLE_WIDESPREAD": "muy poco usada",
    "trend.TRENDY": "de moda",
    "trend.NEAR_TRENDY": "estable",
    "trend.NEAR_UNFASHIONABLE": "perdiendo usuarios poco a poco",
    "trend.UNFASHIONABLE": "en desuso",
    "binding.full_name": "{name}-{version} ({license}), {link}",

    # Knowledge base warnings
    "warning.copyleft-upgrade-required":
        "{binding} solo puede incluirse en un proyecto publicado bajo {project_license} si la "
        "obra combinada se distribuye bajo una licencia copyleft más fuerte.",
    "warning.agpl-gpl3-section13":
        "{binding} puede combinarse con código {project_license} gracias a la sección 13 de la "
        "GPL-3.0 y la AGPL-3.0, pero la cláusula de red de la AGPL sigue aplicando a su parte.",
    "warning.apache-patent-terms":
        "Las cláusulas de patentes de la licencia de {binding} solo son compatibles con "
        "{project_license} si el proyecto se distribuye finalmente bajo GPL-3.0.",
    "warning.gpl2-only-restricts-or-later":
        "Incluir {binding} obliga a distribuir todo el proyecto {project_license} solo bajo GPL-2.0.",
    "warning.gpl3-only-restricts-or-later":
        "Incluir {binding} obliga a distribuir todo el proyecto {project_license} solo bajo GPL-3.0.",
    "warning.eupl-compatibility-list":
        "{binding} y {project_license} solo pueden combinarse mediante la lista de "
        "compatibilidad de la EUPL; compruebe que su uso está cubierto por ella.",
    "warning.lgpl-conversion-to-gpl":
        "{binding} puede incluirse en un proyecto publicado bajo {project_license} usando la "
        "cláusula de la LGPL que permite convertir el componente a la GPL.",
    "warning.lgpl-version-lock":
        "{binding} y {project_license} se refieren a versiones distintas de la LGPL y solo "
        "algunas de sus combinaciones están permitidas.",

    # Components incompatible with project licenses
    "incompatible.root.uncompatible":
        "{binding} es incompatible con un proyecto publicado bajo {project_license} que {redistribution}.",
    "incompatible.root.mostly_uncompatible":
        "{binding} es incompatible con un proyecto publicado bajo {project_license} en la mayoría de casos.",
    "incompatible.root.mostly_compatible":
        "{binding} es compatible con un proyecto publicado bajo {project_license} en la mayoría "
        "de casos, pero no en todos.",
    "incompatible.root.unknown":
        "Se desconoce si {binding} es compatible con un proyecto publicado bajo "
        "{project_license} que {redistribution}.",
    "incompatible.root.undefined":
        "{binding} no tiene una licencia definida, lo que legalmente significa todos los "
        "derechos reservados. Se trata como incompatible con {project_license}.",
    "incompatible.root.unsupported":
        "La licencia de {binding} no está soportada todavía, por lo que se trata como "
        "incompatible con {project_license}.",
    "incompatible.warning.forced":
        "{binding} está forzado a ser compatible con {project_license}. Asegúrese de tener "
        "permiso por escrito del titular de los derechos del componente.",
    "incompatible.warning.mostly":
        "Aunque {binding} puede incluirse a menudo en proyectos {project_license}, analice en "
        "profundidad que su caso concreto no sea una de las excepciones.",
    "incompatible.warning.unsupported":
        "{binding} podría ser compatible con {project_license} cuando su licencia esté "
        "soportada. Disculpe las molestias.",
    "incompatible.warning.saturated":
        "Las incompatibilidades legales no se diluyen por el grado de uso, por lo que el valor "
        "del riesgo se ha elevado al menos a {floor}.",
    "incompatible.good.compatible":
        "{binding} es compatible de forma nativa y puede incluirse en un proyecto publicado bajo {project_license}.",
    "incompatible.good.forced":
        "{binding} está forzado a ser totalmente compatible y puede incluirse en un proyecto "
        "publicado bajo {project_license}.",
    "incompatible.tip.replace":
        "Intente sustituir {binding} por otro componente cuya licencia sea compatible con {project_license}.",
    "incompatible.tip.clarify":
        "Contacte con los autores de {binding} para aclarar su licencia y si es compatible con {project_license}.",
    "incompatible.tip.check":
        "Revise los términos de la licencia de {binding} frente a {project_license} en su caso "
        "concreto antes de usar el componente en el proyecto.",
    "incompatible.tip.general.fully_compatible":
        "Consejo general: Aunque en su caso pueda usar un componente no totalmente compatible, "
        "prefiera componentes cuya licencia sea compatible en cualquier circunstancia.",
    "general.tip.static_links":
        "Consejo general: Intente no enlazar componentes estáticamente, ya que es más probable "
        "que provoque incompatibilidades.",
    "general.tip.own_rights":
        "Consejo general: Si posee todos los derechos sobre un componente problemático, intente "
        "cambiar su licencia en lugar de buscar otro componente.",
    "general.tip.permissive":
        "Consejo general: Intente usar componentes con licencias permisivas, ya que es menos "
        "probable que provoquen riesgos de licenciamiento.",

    # Limited set of potential project licenses
    "limited_project.root.blocked":
        "{candidate} no podría usarse como licencia del proyecto porque {binding} es {compatibility} con ella.",
    "limited_project.root.partial":
        "{candidate} podría usarse como licencia del proyecto, pero {binding} es {compatibility} con ella.",
    "limited_project.root.none":
        "No existe ninguna licencia de código abierto compatible con todas las licencias de los componentes.",
    "limited_project.warning.unsupported":
        "Algunas licencias no podrían usarse como licencia del proyecto porque la licencia de "
        "{binding} no está soportada todavía. Podrían ser válidas cuando lo esté.",
    "limited_project.good.usable":
        "{candidate} puede usarse como licencia del proyecto, porque todos los componentes son "
        "compatibles con ella cuando el proyecto {redistribution}.",
    "limited_project.tip.replace":
        "Intente sustituir {binding} por otro componente compatible con más licencias potenciales del proyecto.",
    "limited_project.tip.root_causes_first":
        "Al cambiar componentes para reducir este riesgo, empiece por los que son causa raíz en más casos.",
    "limited_project.tip.contribution_first":
        "Al cambiar componentes para reducir este riesgo, empiece por los de mayor contribución al proyecto.",
    "limited_project.tip.many_licenses":
        "Consejo general: Prefiera componentes cuyas licencias sean compatibles con muchas "
        "licencias potenciales del proyecto, para poder cambiar la licencia en el futuro.",

    # Limited set of potential components licenses
    "limited_components.root.blocked":
        "Los componentes publicados bajo {candidate} no pueden ser {link} en el proyecto, porque "
        "son {compatibility} con {project_license}.",
    "limited_components.root.none":
        "Ninguna licencia de código abierto es totalmente compatible con las licencias del "
        "proyecto para componentes {link}.",
    "limited_components.good.usable":
        "Los componentes publicados bajo {candidate} pueden ser {link} en el proyecto.",
    "limited_components.tip.single_license":
        "Consejo general: Intente publicar el proyecto bajo una única licencia. Cuantas más "
        "licencias tenga el proyecto, menos licencias de componentes serán compatibles con todas.",
    "limited_components.tip.permissive_project":
        "Consejo general: Las licencias permisivas aceptan menos componentes copyleft, y las "
        "copyleft fuertes aceptan la mayoría de componentes permisivos. Elija la licencia del "
        "proyecto pensando en los componentes que necesitará.",
    "limited_components.tip.dynamic":
        "Consejo general: Enlazar los componentes dinámicamente suele ampliar el conjunto de licencias aceptables.",

    # Obsolescence
    "obsolete_project.root": "El proyecto se publica bajo {license}, que es la {value} de la licencia.",
    "obsolete_project.good": "El proyecto se publica bajo {license}, que es la {value} de la licencia.",
    "obsolete_project.tip": "Intente publicar el proyecto bajo una versión más nueva de {license}, si es posible.",
    "obsolete_project.tip.general":
        "Consejo general: Mantenga las licencias del proyecto en sus últimas versiones, ya que es "
        "menos probable que provoquen incompatibilidades y problemas de mantenimiento.",
    "obsolete_components.root": "{binding} usa la {value} de su licencia.",
    "obsolete_components.good": "{binding} usa la {value} de su licencia.",
    "obsolete_components.tip":
        "Intente sustituir {binding} por un componente publicado bajo una versión más nueva de la licencia, si es posible.",
    "obsolete_components.tip.general":
        "Consejo general: Además de una versión más nueva de la misma licencia, podría usar otras "
        "licencias modernas también compatibles con el proyecto.",

    # Trends
    "unfashionable_project.root": "El proyecto se publica bajo {license}, que está {value}.",
    "unfashionable_project.good": "El proyecto se publica bajo {license}, que está {value}.",
    "unfashionable_project.tip":
        "Intente publicar el proyecto bajo una licencia más de moda que {license}, si es posible.",
    "unfashionable_project.tip.general":
        "Consejo general: Publicar el proyecto bajo una única licencia facilita mantenerlo de moda.",
    "unfashionable_components.root": "{binding} usa una licencia que está {value}.",
    "unfashionable_components.good": "{binding} usa una licencia que está {value}.",
    "unfashionable_components.tip":
        "Intente sustituir {binding} por un componente publicado bajo una licencia más de moda, si es posible.",
    "unfashionable_components.tip.general":
        "Consejo general: Las licencias de moda atraen más contribuidores y más componentes compatibles.",

    # Spreading
    "scarce_project.root": "El proyecto se publica bajo {license}, que está {value}.",
    "scarce_project.good": "El proyecto se publica bajo {license}, que está {value}.",
    "scarce_project.tip":
        "Intente publicar el proyecto bajo una licencia más extendida que {license}, si es posible.",
    "scarce_project.tip.general":
        "Consejo general: A veces otra versión de la misma licencia está más extendida; puede no "
        "ser necesario cambiar a una licencia muy distinta.",
    "scarce_components.root": "{binding} usa una licencia que está {value}.",
    "scarce_components.good": "{binding} usa una licencia que está {value}.",
    "scarce_components.tip":
        "Intente sustituir {binding} por un componente publicado bajo una licencia más extendida, si es posible.",
    "scarce_components.tip.general":
        "Consejo general: Los componentes con licencias extendidas son más fáciles de sustituir y de combinar.",
    "property.warning.synthetic":
        "La licencia de {binding} es {license}, por lo que se trata como el peor caso.",

    # Heterogeneous components licenses
    "heterogeneous.root":
        "{binding} usa una licencia distinta de la licencia más representativa de los "
        "componentes ({main_license}).",
    "heterogeneous.good": "{binding} usa la licencia más representativa de los componentes.",
    "heterogeneous.warning.count":
        "Los componentes usan {count} licencias distintas. Sus términos legales deben tenerse en "
        "cuenta cada vez que se incluye un componente o cambia la licencia del proyecto.",
    "heterogeneous.warning.main":
        "Se ha elegido {main_license} como licencia más representativa porque la usan los "
        "componentes más relevantes.",
    "heterogeneous.tip": "Intente sustituir {binding} por un componente publicado bajo {main_license}.",
    "heterogeneous.tip.general":
        "Consejo general: Intente no incluir una obra derivada de un componente bajo una licencia "
        "distinta de la del componente original.",

    # Components misaligned from project licenses
    "misaligned.root": "{binding} usa una licencia distinta de {project_licenses}.",
    "misaligned.good": "{binding} usa la misma licencia que el proyecto.",
    "misaligned.good.forced": "{binding} tiene permiso para usarse bajo la licencia del proyecto.",
    "misaligned.tip": "Intente sustituir {binding} por un componente publicado bajo {project_licenses}.",
    "misaligned.tip.general":
        "Consejo general: Los componentes con la misma licencia que el proyecto nunca provocan "
        "incompatibilidades de licencia.",

    # Engine
    "engine.root.failure": "No se pudo completar el análisis: {error}",

    # Reports
    "report.project": "Nombre del proyecto",
    "report.version": "Versión del proyecto",
    "report.licenses": "Licencias del proyecto",
    "report.redistribution": "Redistribución del proyecto",
    "report.bindings": "Componentes enlazados",
    "report.contribution": "Contribución al proyecto",
    "report.risk_analysis": "Análisis de riesgos",
    "report.scores": "Riesgo = {value} (Exposición = {exposure}, Impacto = {impact})",
    "report.rootcauses": "Causas raíz",
    "report.warnings": "Advertencias",
    "report.goodthings": "Aspectos positivos",
    "report.tips": "Consejos para mitigar el riesgo",
}
