"""Shared stack-trace samples for the test suite.

All samples are fixed text; no random input.
"""

from __future__ import annotations

import pytest

JAVA_SHORT = """\
Exception in thread "main" java.lang.IllegalStateException
        at com.example.adder.app.App.run(App.java:21)
        at com.example.adder.app.App.main(App.java:14)
Caused by: com.example.adder..AdderException
        at com.example.adder.Adder.add(Adder.java:13)
        ... 2 more
"""

JAVA_SPRING = """\
java.lang.IllegalArgumentException: foo
    com.example.stacktrace.Example.fail(Example.java:11)
    sun.reflect.NativeMethodAccessorImpl.invoke0(Native Method)
    sun.reflect.NativeMethodAccessorImpl.invoke(NativeMethodAccessorImpl.java:62)
    sun.reflect.DelegatingMethodAccessorImpl.invoke(DelegatingMethodAccessorImpl.java:43)
    java.lang.reflect.Method.invoke(Method.java:483)
    org.springframework.web.method.support.InvocableHandlerMethod.doInvoke(InvocableHandlerMethod.java:221)
    org.springframework.web.method.support.InvocableHandlerMethod.invokeForRequest(InvocableHandlerMethod.java:136)
    org.springframework.web.servlet.mvc.method.annotation.ServletInvocableHandlerMethod.invokeAndHandle(ServletInvocableHandlerMethod.java:114)
    org.springframework.web.servlet.mvc.method.annotation.RequestMappingHandlerAdapter.invokeHandlerMethod(RequestMappingHandlerAdapter.java:827)
    org.springframework.web.servlet.mvc.method.annotation.RequestMappingHandlerAdapter.handleInternal(RequestMappingHandlerAdapter.java:738)
    org.springframework.web.servlet.mvc.method.AbstractHandlerMethodAdapter.handle(AbstractHandlerMethodAdapter.java:85)
    org.springframework.web.servlet.DispatcherServlet.doDispatch(DispatcherServlet.java:963)
    org.springframework.web.servlet.DispatcherServlet.doService(DispatcherServlet.java:897)
    org.springframework.security.web.FilterChainProxy$VirtualFilterChain.doFilter(FilterChainProxy.java:317)
    org.springframework.security.web.access.intercept.FilterSecurityInterceptor.invoke(FilterSecurityInterceptor.java:127)
"""

RUST_BACKTRACE = """\
stack backtrace:
   0: backtrace::backtrace::libunwind::trace
             at /cargo/registry/src/github.com-1ecc6299db9ec823/backtrace-0.3.37/src/backtrace/libunwind.rs:88
   1: backtrace::backtrace::trace_unsynchronized
             at /cargo/registry/src/github.com-1ecc6299db9ec823/backtrace-0.3.37/src/backtrace/mod.rs:66
   3: <std::sys_common::backtrace::_print::DisplayBacktrace as core::fmt::Display>::fmt
             at src/libstd/sys_common/backtrace.rs:60
   8: std::panicking::default_hook::{{closure}}
             at src/libstd/panicking.rs:196
  22: rustc_typeck::check::callee::<impl rustc_typeck::check::FnCtxt>::confirm_builtin_call
  66: rustc::ty::query::<impl rustc::ty::query::config::QueryAccessors for rustc::ty::query::queries::typeck_tables_of>::compute
  82: std::thread::local::LocalKey<T>::with
"""

RUST_UNNUMBERED = """\
std::panicking::begin_panic_handler::{{closure}}
std::panicking::begin_panic_handler
std::panicking::rust_panic_with_hook
core::panicking::panic_fmt
core::panicking::panic
my_app::handlers::<impl my_app::Handler for (A,)>::call
my_app::handlers::<impl my_app::Handler for (A, B)>::call
my_app::main
"""

SAMPLES: dict[str, str] = {
    "java_short": JAVA_SHORT,
    "java_spring": JAVA_SPRING,
    "rust_backtrace": RUST_BACKTRACE,
    "rust_unnumbered": RUST_UNNUMBERED,
    "blank_lines": "\n\na.b\n\na.c\n",
    "crlf": "a::b::one\r\na::b::two\r\n",
}


@pytest.fixture(params=sorted(SAMPLES))
def sample_trace(request: pytest.FixtureRequest) -> str:
    """Each sample stack trace in turn."""
    return SAMPLES[request.param]


@pytest.fixture
def java_short() -> str:
    return JAVA_SHORT
