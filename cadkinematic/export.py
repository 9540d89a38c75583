"""
export.py
--------------

Resolve every link and joint of an assembly into a
`KinematicChain`, skipping and reporting the ones that
cannot be resolved instead of aborting the whole export.
"""
import collections

from .chain import KinematicChain
from .joint import RevoluteJoint, FixedJoint
from .link import Link

LinkSpec = collections.namedtuple(
    'LinkSpec', ['name', 'component', 'frame'])

JointSpec = collections.namedtuple(
    'JointSpec', ['name', 'parent', 'child', 'axis', 'kind', 'limits'])
JointSpec.__new__.__defaults__ = (None, 'revolute', None)


class ExportReport(object):
    """
    Names of the links and joints left out of an export.
    """

    def __init__(self):
        self.skipped_links = []
        self.skipped_joints = []

    @property
    def complete(self):
        return not (self.skipped_links or self.skipped_joints)


def _resolve_joint(resolver, spec, links):
    parent = links[spec.parent]
    child = links[spec.child]
    # parent frame to child frame at zero joint position
    initial = (parent.transform.inverse() * child.transform).matrix
    connects = (spec.parent, spec.child)

    if spec.kind == 'fixed':
        return FixedJoint(name=spec.name, connects=connects,
                          initial=initial)
    if spec.kind != 'revolute':
        raise ValueError(f'unsupported joint kind `{spec.kind}`!')

    ok, axis = resolver.axis_direction(
        child.model, spec.axis, child.frame_name)
    if not ok:
        return None
    return RevoluteJoint(name=spec.name,
                         axis=axis,
                         connects=connects,
                         initial=initial,
                         limits=spec.limits)


def build_chain(resolver, links, joints, base_link=None):
    """
    Resolve link frames and joint axes into a kinematic chain.

    Parameters
    ------------
    resolver : GeometryResolver
      Resolver holding the catalog, scale and reporter
    links : (n,) LinkSpec
      Component and reference frame name of every link
    joints : (m,) JointSpec
      Parent, child and axis name of every joint
    base_link : None or str
      Name of the base link, the first link if None

    Returns
    ------------
    chain : KinematicChain
      Chain holding the resolved links and joints
    report : ExportReport
      Links and joints which could not be resolved
    """
    links = list(links)
    report = ExportReport()

    resolved = {}
    for spec in links:
        ok, transform = resolver.root_to_child_frame(
            spec.component, spec.frame)
        if not ok:
            resolver.reporter.warn(f'Skipping link {spec.name}')
            report.skipped_links.append(spec.name)
            continue
        resolved[spec.name] = Link(name=spec.name,
                                   transform=transform,
                                   frame_name=spec.frame,
                                   model=spec.component.model)
        resolver.reporter.transform(f'Link {spec.name}', transform)

    connected = {}
    for spec in joints:
        joint = None
        if spec.parent in resolved and spec.child in resolved:
            joint = _resolve_joint(resolver, spec, resolved)
        if joint is None:
            resolver.reporter.warn(f'Skipping joint {spec.name}')
            report.skipped_joints.append(spec.name)
            continue
        connected[spec.name] = joint

    if base_link is None:
        base_link = links[0].name if len(links) > 0 else 'base'

    chain = KinematicChain(joints=connected,
                           links=resolved,
                           base_link=base_link)
    return chain, report
